from decimal import Decimal, ROUND_HALF_UP
import re

"""字符串中获取价格、订单金额计算"""

CENT = Decimal("0.01")


def parse_money(text: str) -> Decimal:
    """
        从 '$29.99' 或 'Item total: $39.98' 提取 Decimal
        只认 $ 后面的数字，不关心前面的 label 文案
        """
    match = re.search(r"\$\s*(\d+(?:\.\d+)?)", text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1))


def calculate_tax(subtotal: Decimal, rate: Decimal) -> Decimal:
    """税额四舍五入到分"""
    return (subtotal * rate).quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_total(subtotal: Decimal, rate: Decimal) -> Decimal:
    return subtotal + calculate_tax(subtotal, rate)


def is_non_decreasing(values: list) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))

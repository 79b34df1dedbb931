import re
from decimal import Decimal

PRICE = re.compile(r"^\$\d+\.\d{2}$")


class InventoryAssert:

    @staticmethod
    def product_count(actual: int, expect: int):
        assert actual == expect, f"商品列表应有{expect}个商品，实际{actual}个"

    @staticmethod
    def all_filled(column: str, values: list):
        assert values, f"商品{column}列表为空"
        blank = [i for i, value in enumerate(values) if not (value and value.strip())]
        assert not blank, f"第{blank}个商品的{column}为空"

    @staticmethod
    def price_texts(prices: list[str]):
        assert prices, "商品价格列表为空"
        wrong = [p for p in prices if not PRICE.match(p)]
        assert not wrong, f"价格不是 $x.xx 格式：{wrong}"

    @staticmethod
    def prices_positive(prices: list[Decimal]):
        assert all(price > 0 for price in prices), f"存在非正数价格：{prices}"

    @staticmethod
    def sorted_by(values: list, descending: bool = False):
        order = "倒序" if descending else "正序"
        assert values == sorted(values, reverse=descending), f"未按{order}排列：{values}"

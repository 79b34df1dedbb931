import re
from decimal import Decimal

from utils.common_utils import CENT

# "Item total: $39.98" / "Tax: $3.20"；空购物车时为 "$0"
LABEL_AMOUNT = re.compile(r"^[A-Za-z ]+: \$\d+(\.\d{2})?$")


class CheckOutAssert:

    @staticmethod
    def message_contains(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"提示文案「{actual_msg}」中没有「{expect_msg}」"

    @staticmethod
    def field_filled(name: str, value: str):
        assert value.strip(), f"订单确认页{name}为空"

    @staticmethod
    def label_amount_format(text: str):
        """只校验「label: $金额」结构，不校验 label 文案"""
        assert LABEL_AMOUNT.match(text), f"金额格式错误：{text!r}"

    @staticmethod
    def amount_equal(name: str, expect: Decimal, actual: Decimal):
        assert expect == actual, f"{name}：页面显示{actual}，按商品行计算为{expect}"

    @staticmethod
    def total_is_sum(item_total: Decimal, tax: Decimal, total: Decimal):
        """总价 = 商品总价 + 税，误差小于一分"""
        diff = abs(total - (item_total + tax))
        assert diff < CENT, f"总价{total} != 商品总价{item_total} + 税{tax}（差{diff}）"

    @staticmethod
    def tax_is_rate(expect_tax: Decimal, tax: Decimal):
        assert abs(tax - expect_tax) < CENT, f"税额{tax}，按税率应为{expect_tax}"

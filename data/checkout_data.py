"""checkout功能测试数据：收货人信息、订单信息、税率"""
from dataclasses import dataclass
from decimal import Decimal

from data.messages import ERROR_MESSAGES


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


CONTAINER_INFO = CheckoutInfo("John", "Doe", "12345")

# 收货人信息缺失 -> 预期错误提示
CONTAINER_EMPTY_CASES = {
    "missing_first_name": (CheckoutInfo("", "Doe", "12345"), ERROR_MESSAGES["required_first_name"]),
    "missing_last_name": (CheckoutInfo("John", "", "12345"), ERROR_MESSAGES["required_last_name"]),
    "missing_postal_code": (CheckoutInfo("John", "Doe", ""), ERROR_MESSAGES["required_postal_code"]),
    "all_empty": (CheckoutInfo("", "", ""), ERROR_MESSAGES["required_first_name"]),
}

PAYMENT_INFO = "SauceCard #31337"
SHIPPING_INFO = "Free Pony Express Delivery!"

TAX_RATE = Decimal("0.08")

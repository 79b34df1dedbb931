from dataclasses import dataclass
from decimal import Decimal

import allure
from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from assertions.check_out_assert import CheckOutAssert
from config.locators import CART_LOCATORS, CHECKOUT_LOCATORS
from config.pages import URLS
from config.settings import ENV
from data.checkout_data import TAX_RATE
from pages.base_page import BasePage
from pages.navigation_menu import NavigationMenu
from utils.common_utils import calculate_tax, parse_money


@dataclass(frozen=True)
class OrderSummary:
    item_total: Decimal
    tax: Decimal
    total: Decimal
    payment_info: str
    shipping_info: str
    item_count: int


# 五个字段 + 商品行数在同一次 evaluate 中读取，保证是同一时刻的页面快照
_SUMMARY_SNAPSHOT_JS = """(s) => {
    const read = (sel) => (document.querySelector(sel)?.textContent ?? '').trim();
    return {
        item_total: read(s.item_total),
        tax: read(s.tax),
        total: read(s.total),
        payment_info: read(s.payment_info),
        shipping_info: read(s.shipping_info),
        item_count: document.querySelectorAll(s.cart_item).length,
    };
}"""


class CheckoutStepTwoPage(BasePage):
    """checkout-step-two.html：订单确认（只读）"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)
        #  商品信息
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])
        self.row_names = page.locator(CART_LOCATORS["cart_item_name"])
        self.row_prices = page.locator(CART_LOCATORS["cart_item_price"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_LOCATORS["shipping_information"])  # 配送信息value
        self.item_total = page.locator(CHECKOUT_LOCATORS["products_price"])  # 商品总价格
        self.tax = page.locator(CHECKOUT_LOCATORS["tax_price"])  # 税
        self.total = page.locator(CHECKOUT_LOCATORS["order_price"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def navigate(self, step_two_url: str = URLS[ENV]["checkout_step_two"]):
        self.open(step_two_url)

    @allure.step("提交订单 Finish")
    def finish(self):
        self.click(self.finish_button)

    @allure.step("Checkout-step-two -> Cancel")
    def cancel(self):
        self.click(self.cancel_button)

    # ================= 数据获取 =================
    def get_item_total_text(self) -> str:
        return self.text(self.item_total)

    def get_tax_text(self) -> str:
        return self.text(self.tax)

    def get_total_text(self) -> str:
        return self.text(self.total)

    def get_item_total(self) -> Decimal:
        return parse_money(self.get_item_total_text())

    def get_tax(self) -> Decimal:
        return parse_money(self.get_tax_text())

    def get_total(self) -> Decimal:
        return parse_money(self.get_total_text())

    def get_payment_info(self) -> str:
        return self.text(self.payment_information)

    def get_shipping_info(self) -> str:
        return self.text(self.shipping_information)

    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_cart_item_names(self) -> list[str]:
        return self.get_texts(self.row_names)

    def get_cart_item_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_texts(self.row_prices)]

    def get_order_summary(self) -> OrderSummary:
        self.wait_visible(self.total)
        snapshot = self.page.evaluate(_SUMMARY_SNAPSHOT_JS, {
            "item_total": CHECKOUT_LOCATORS["products_price"],
            "tax": CHECKOUT_LOCATORS["tax_price"],
            "total": CHECKOUT_LOCATORS["order_price"],
            "payment_info": CHECKOUT_LOCATORS["payment_information"],
            "shipping_info": CHECKOUT_LOCATORS["shipping_information"],
            "cart_item": CART_LOCATORS["cart_item"],
        })
        return OrderSummary(
            item_total=parse_money(snapshot["item_total"]),
            tax=parse_money(snapshot["tax"]),
            total=parse_money(snapshot["total"]),
            payment_info=snapshot["payment_info"],
            shipping_info=snapshot["shipping_info"],
            item_count=snapshot["item_count"])

    # ========== 基础验证 ==========
    def verify_order_totals(self):
        """金额格式、商品总价=各行之和、总价=商品总价+税、税=商品总价*税率"""
        for text in (self.get_item_total_text(), self.get_tax_text(), self.get_total_text()):
            CheckOutAssert.label_amount_format(text)

        summary = self.get_order_summary()
        CheckOutAssert.field_filled("支付信息", summary.payment_info)
        CheckOutAssert.field_filled("配送信息", summary.shipping_info)
        CheckOutAssert.amount_equal("商品总价", sum(self.get_cart_item_prices(), Decimal("0")), summary.item_total)
        CheckOutAssert.total_is_sum(summary.item_total, summary.tax, summary.total)
        CheckOutAssert.tax_is_rate(calculate_tax(summary.item_total, TAX_RATE), summary.tax)

    def verify_checkout_products(self, expect_names: list[str]):
        CartAssert.same_products(expect_names, self.get_cart_item_names(), where="订单确认页")

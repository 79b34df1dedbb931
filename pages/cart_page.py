from dataclasses import dataclass
from decimal import Decimal

import allure
from playwright.sync_api import Page, expect

from assertions.cart_assert import CartAssert
from config.locators import CART_LOCATORS, remove_button
from config.pages import URLS
from config.settings import ENV
from pages.base_page import BasePage
from pages.navigation_menu import NavigationMenu
from utils.common_utils import parse_money


@dataclass(frozen=True)
class CartItem:
    name: str
    price: Decimal
    quantity: int


# 一次性读取同一行的名称/价格/数量，避免多次读取之间页面重新渲染
_ROW_SNAPSHOT_JS = """(row, s) => {
    const read = (sel) => (row.querySelector(sel)?.textContent ?? '').trim();
    return {name: read(s.name), price: read(s.price), quantity: read(s.quantity)};
}"""


class CartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)

        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_item_name = page.locator(CART_LOCATORS["cart_item_name"])  # 单商品名称
        self.cart_item_price = page.locator(CART_LOCATORS["cart_item_price"])  # 单商品价格
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # checkout按钮

    # ================= 页面行为 =================
    def navigate(self, cart_url: str = URLS[ENV]["cart"]):
        self.open(cart_url)

    @allure.step("购物车移除商品：{name}")
    def remove_item_by_name(self, name: str):
        self.click(self.page.locator(remove_button(name)))

    @allure.step("清空购物车")
    def remove_all_items(self):
        """
        每次都重新读取剩余行数，并等待行数减一后再删下一行；
        最多执行初始行数次，结束时购物车必须为空
        """
        remaining = self.get_cart_item_count()
        for _ in range(remaining):
            if remaining == 0:
                break
            self.click(self.cart_items.first.locator(CART_LOCATORS["cart_item_button"]))
            expect(self.cart_items).to_have_count(remaining - 1)
            remaining = self.get_cart_item_count()
        expect(self.cart_items).to_have_count(0)

    @allure.step("继续购物")
    def continue_shopping(self):
        self.click(self.continue_shopping_button)

    @allure.step("购物车 -> Checkout")
    def checkout(self):
        self.click(self.checkout_button)

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def get_cart_item_names(self) -> list[str]:
        return self.get_texts(self.cart_item_name)

    def get_cart_item_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_texts(self.cart_item_price)]

    def get_cart_subtotal(self) -> Decimal:
        # 购物车页没有总价，按行价格求和；显式指定 sum 初始值
        return sum(self.get_cart_item_prices(), Decimal("0"))

    def is_item_in_cart(self, name: str) -> bool:
        return any(name in item_name for item_name in self.get_cart_item_names())

    def get_cart_item_details(self, index: int) -> CartItem:
        snapshot = self.cart_items.nth(index).evaluate(
            _ROW_SNAPSHOT_JS,
            {"name": CART_LOCATORS["cart_item_name"],
             "price": CART_LOCATORS["cart_item_price"],
             "quantity": CART_LOCATORS["cart_quantity"]})
        return CartItem(
            name=snapshot["name"],
            price=parse_money(snapshot["price"]),
            quantity=int(snapshot["quantity"] or 0))

    def get_cart_items(self) -> list[CartItem]:
        return [self.get_cart_item_details(i) for i in range(self.get_cart_item_count())]

    # ================= 基础验证 =================
    def verify_badge_matches_rows(self):
        CartAssert.badge_matches_rows(self.nav.get_cart_item_count(), self.get_cart_item_count())

    def verify_cart_products(self, expect_names: list[str]):
        CartAssert.same_products(expect_names, self.get_cart_item_names())

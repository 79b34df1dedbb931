from decimal import Decimal

import allure
from playwright.sync_api import Page, expect

from config.locators import PRODUCT_DETAILS_LOCATORS
from config.pages import product_url
from pages.base_page import BasePage
from pages.inventory_page import ProductDetails
from pages.navigation_menu import NavigationMenu
from utils.common_utils import parse_money


class ProductDetailsPage(BasePage):
    """
    商品详情页：Add to cart / Remove 是同一个按钮，只有文案不同。
    是否已加购每次都从按钮文案读取，页面对象本身不保存加购状态。
    """

    ADD_LABEL = "Add to cart"
    REMOVE_LABEL = "Remove"

    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)
        self.back_to_products_button = page.locator(PRODUCT_DETAILS_LOCATORS["back_to_products"])
        self.product_name = page.locator(PRODUCT_DETAILS_LOCATORS["product_name"])
        self.product_description = page.locator(PRODUCT_DETAILS_LOCATORS["product_desc"])
        self.product_price = page.locator(PRODUCT_DETAILS_LOCATORS["product_price"])
        self.cart_toggle_button = page.locator(PRODUCT_DETAILS_LOCATORS["cart_toggle_button"])

    # ================= 页面行为 =================
    def navigate(self, product_id: int):
        self.open(product_url(product_id))
        self.wait_visible(self.product_name)

    def click_back_to_products(self):
        self.click(self.back_to_products_button)

    @allure.step("详情页加购")
    def add_to_cart(self):
        expect(self.cart_toggle_button).to_have_text(self.ADD_LABEL, ignore_case=True)
        self.click(self.cart_toggle_button)

    @allure.step("详情页移除")
    def remove_from_cart(self):
        expect(self.cart_toggle_button).to_have_text(self.REMOVE_LABEL, ignore_case=True)
        self.click(self.cart_toggle_button)

    # ================= 数据获取 =================
    def get_cart_button_label(self) -> str:
        return self.text(self.cart_toggle_button)

    def is_product_in_cart(self) -> bool:
        return self.REMOVE_LABEL.lower() in self.get_cart_button_label().lower()

    def get_product_name(self) -> str:
        return self.text(self.product_name)

    def get_product_description(self) -> str:
        return self.text(self.product_description)

    def get_product_price(self) -> Decimal:
        return parse_money(self.text(self.product_price))

    def get_product_details(self) -> ProductDetails:
        return ProductDetails(
            name=self.get_product_name(),
            description=self.get_product_description(),
            price=self.get_product_price())

from functools import cached_property

from playwright.sync_api import Page

from pages.base_page import BasePage
from pages.cart_page import CartItem, CartPage
from pages.checkout_complete_page import CheckoutCompletePage
from pages.checkout_step_one_page import CheckoutStepOnePage
from pages.checkout_step_two_page import CheckoutStepTwoPage, OrderSummary
from pages.footer import Footer
from pages.inventory_page import InventoryPage, ProductDetails
from pages.login_page import LoginPage
from pages.navigation_menu import NavigationMenu
from pages.product_details_page import ProductDetailsPage

__all__ = [
    "BasePage", "NavigationMenu", "Footer", "LoginPage", "InventoryPage", "ProductDetailsPage",
    "CartPage", "CheckoutStepOnePage", "CheckoutStepTwoPage", "CheckoutCompletePage",
    "ProductDetails", "CartItem", "OrderSummary", "Pages",
]


class Pages:
    """
    同一个 Playwright Page 上的全部页面对象，第一次访问时创建。
    """

    def __init__(self, page: Page):
        self.page = page

    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.page)

    @cached_property
    def inventory_page(self) -> InventoryPage:
        return InventoryPage(self.page)

    @cached_property
    def product_details_page(self) -> ProductDetailsPage:
        return ProductDetailsPage(self.page)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.page)

    @cached_property
    def checkout_step_one_page(self) -> CheckoutStepOnePage:
        return CheckoutStepOnePage(self.page)

    @cached_property
    def checkout_step_two_page(self) -> CheckoutStepTwoPage:
        return CheckoutStepTwoPage(self.page)

    @cached_property
    def checkout_complete_page(self) -> CheckoutCompletePage:
        return CheckoutCompletePage(self.page)

import allure
from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_LOCATORS
from config.pages import URLS
from config.settings import ENV
from data.messages import CONFIRMATION_PHRASE
from pages.base_page import BasePage
from pages.navigation_menu import NavigationMenu


class CheckoutCompletePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)
        self.finish_message = page.locator(CHECKOUT_LOCATORS["finish_page_message"])  # 完成页面标题
        self.finish_text = page.locator(CHECKOUT_LOCATORS["finish_page_text"])  # 完成页面说明
        self.back_home_button = page.locator(CHECKOUT_LOCATORS["back_home_button"])

    def navigate(self, complete_url: str = URLS[ENV]["checkout_complete"]):
        self.open(complete_url)

    @allure.step("Back Home")
    def back_home(self):
        self.click(self.back_home_button)

    def get_complete_header_text(self) -> str:
        return self.text(self.finish_message)

    def get_complete_message_text(self) -> str:
        return self.text(self.finish_text)

    def is_order_complete(self) -> bool:
        return self.is_shown(self.finish_message)

    def verify_checkout_complete(self) -> bool:
        return CONFIRMATION_PHRASE in self.get_complete_header_text().lower()

    # ========== 提交订单页面 ==========
    def verify_submit_order(self, finish_message: str):
        CheckOutAssert.message_contains(self.get_complete_header_text(), finish_message)

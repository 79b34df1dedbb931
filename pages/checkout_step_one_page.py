import allure
from playwright.sync_api import Page

from config.locators import CHECKOUT_LOCATORS
from config.pages import URLS
from config.settings import ENV
from data.checkout_data import CheckoutInfo
from pages.base_page import BasePage
from pages.navigation_menu import NavigationMenu


class CheckoutStepOnePage(BasePage):
    """checkout-step-one.html：收货人信息"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)
        self.firstName_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.container_error_msg = page.locator(CHECKOUT_LOCATORS["container_error_msg"])  # 收货人未填写错误提示
        self.error_close_button = page.locator(CHECKOUT_LOCATORS["error_close_button"])
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def navigate(self, step_one_url: str = URLS[ENV]["checkout_step_one"]):
        self.open(step_one_url)

    def enter_first_name(self, first_name: str):
        self.fill(self.firstName_input, first_name)

    def enter_last_name(self, last_name: str):
        self.fill(self.lastName_input, last_name)

    def enter_postal_code(self, postal_code: str):
        self.fill(self.postalCode_input, postal_code)

    @allure.step("填写收货人信息")
    def fill_checkout_info(self, info: CheckoutInfo):
        self.enter_first_name(info.first_name)
        self.enter_last_name(info.last_name)
        self.enter_postal_code(info.postal_code)

    @allure.step("Checkout-step-one -> Continue")
    def continue_checkout(self):
        self.click(self.continue_button)

    @allure.step("Checkout-step-one -> Cancel")
    def cancel(self):
        self.click(self.cancel_button)

    def complete_step_one(self, info: CheckoutInfo):
        self.fill_checkout_info(info)
        self.continue_checkout()

    def close_error_message(self):
        self.click(self.error_close_button)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.read_text_result(self.container_error_msg, "checkout error").value_or("")

    def is_error_message_visible(self) -> bool:
        return self.is_shown(self.container_error_msg)

    def get_field_values(self) -> CheckoutInfo:
        return CheckoutInfo(
            first_name=self.firstName_input.input_value(),
            last_name=self.lastName_input.input_value(),
            postal_code=self.postalCode_input.input_value())

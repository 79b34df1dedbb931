import allure
from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.pages import URLS, PATHS
from config.settings import ENV, NAVIGATION_TIMEOUT
from pages.base_page import BasePage


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.error_close_button = page.locator(LOGIN_LOCATORS["error_close_button"])  # 错误提示关闭按钮

    # ================= 页面行为 =================
    def navigate(self, login_url: str = URLS[ENV]["login"]):
        self.open(login_url)
        self.wait_visible(self.username_input)

    def enter_username(self, username: str):
        self.fill(self.username_input, username)

    def enter_password(self, password: str):
        self.fill(self.password_input, password)

    def click_login(self):
        self.click(self.login_button)

    @allure.step("登录：{username}")
    def login(self, username: str, password: str):
        # 非事务：中间步骤失败直接抛出，表单可能残留部分输入
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()

    def close_error_message(self):
        self.click(self.error_close_button)

    def clear_username(self):
        self.username_input.clear()

    def clear_password(self):
        self.password_input.clear()

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.read_text_result(self.error_message, "login error").value_or("")

    def is_error_message_visible(self) -> bool:
        return self.is_shown(self.error_message)

    def get_username_value(self) -> str:
        return self.username_input.input_value()

    def get_password_value(self) -> str:
        return self.password_input.input_value()

    def is_login_button_enabled(self) -> bool:
        return self.login_button.is_enabled()

    # ========== 登录校验 ==========
    def verify_login_success(self, pattern: str = PATHS["inventory"]):
        # performance_glitch_user 跳转较慢，用导航超时
        self.wait_url(pattern, timeout=NAVIGATION_TIMEOUT)

    def verify_login_fail(self, expect_msg: str):
        LoginAssert.error_shown(self.is_error_message_visible(), self.get_error_message(), expect_msg)

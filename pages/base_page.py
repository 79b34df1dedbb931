import re

import allure
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from utils.element_result import TextResult


class BasePage:

    def __init__(self, page: Page):
        self.page = page

    # ========= 基础动作 =========
    def open(self, url: str):
        with allure.step(f"打开页面 {url}"):
            self.page.goto(url)

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def get_texts(self, locator: Locator) -> list[str]:
        return locator.all_inner_texts()

    def get_attrs(self, locator: Locator, attr: str) -> list[str]:
        return [locator.nth(i).get_attribute(attr) for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 可选元素（fail-closed） =========
    def read_text_result(self, locator: Locator, description: str = "") -> TextResult:
        """元素不存在 / 读取过程中消失 -> absent，不抛异常"""
        try:
            if locator.count() == 0:
                return TextResult.absent(description)
            return TextResult.found(locator.first.inner_text(), description)
        except PlaywrightError:
            return TextResult.absent(description)

    def is_shown(self, locator: Locator) -> bool:
        try:
            return locator.is_visible()
        except PlaywrightError:
            return False

    # ========= 等待 =========
    def wait_visible(self, locator: Locator):
        expect(locator).to_be_visible()  # 严格模式：locator 匹配多个元素会报错，需要时用 .first

    def wait_url(self, pattern: str, timeout: float = None):
        """pattern 按字面量匹配 URL 片段"""
        expect(self.page).to_have_url(re.compile(re.escape(pattern)), timeout=timeout)

    def wait_for_page_load(self):
        """DOM 解析完成 + 网络空闲，刚跳转的页面交互前的通用同步点"""
        self.page.wait_for_load_state("domcontentloaded")
        self.page.wait_for_load_state("networkidle")

    # ========= 浏览器存储 =========
    def get_local_storage_item(self, key: str):
        """不存在返回 None"""
        return self.page.evaluate("(key) => localStorage.getItem(key)", key)

    def set_local_storage_item(self, key: str, value: str):
        self.page.evaluate("([key, value]) => localStorage.setItem(key, value)", [key, value])

    def clear_local_storage(self):
        self.page.evaluate("() => localStorage.clear()")

    def get_session_storage_item(self, key: str):
        return self.page.evaluate("(key) => sessionStorage.getItem(key)", key)

    def clear_session_storage(self):
        self.page.evaluate("() => sessionStorage.clear()")

    def get_cookie(self, name: str):
        """当前 context 中名为 name 的 cookie（dict），没有返回 None"""
        return next((c for c in self.page.context.cookies() if c["name"] == name), None)

    # ========= 页面状态 =========
    def get_current_url(self) -> str:
        return self.page.url

    def get_page_title(self) -> str:
        return self.page.title()

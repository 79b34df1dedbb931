from playwright.sync_api import Page

from config.locators import FOOTER_LOCATORS
from pages.base_page import BasePage


class Footer(BasePage):
    """登录后页面底部：社交链接 + 版权信息"""

    SOCIAL_LINKS = ("twitter", "facebook", "linkedin")

    def __init__(self, page: Page):
        super().__init__(page)
        self.copyright = page.locator(FOOTER_LOCATORS["copyright"])

    def get_social_link(self, name: str) -> str:
        if name not in self.SOCIAL_LINKS:
            raise ValueError(f"未知社交链接：{name}，可选：{list(self.SOCIAL_LINKS)}")
        return self.page.locator(FOOTER_LOCATORS[name]).locator("a").get_attribute("href") or ""

    def is_social_link_visible(self, name: str) -> bool:
        if name not in self.SOCIAL_LINKS:
            raise ValueError(f"未知社交链接：{name}，可选：{list(self.SOCIAL_LINKS)}")
        return self.is_shown(self.page.locator(FOOTER_LOCATORS[name]))

    def get_copyright_text(self) -> str:
        return self.text(self.copyright)

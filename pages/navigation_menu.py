import json

import allure
from playwright.sync_api import Page, expect

from config.locators import NAVIGATION_LOCATORS
from data.inventory_data import CART_STORAGE_KEY
from pages.base_page import BasePage
from utils.element_result import TextResult


class NavigationMenu(BasePage):
    """
    登录后各页面共用的导航能力：左侧菜单 + 购物车icon/角标。
    页面对象通过组合持有（self.nav），不通过继承获得。
    """

    # 菜单项简称 -> 定位器属性名
    MENU_ITEMS = {
        "all_items": "all_items_link",
        "about": "about_link",
        "logout": "logout_link",
        "reset": "reset_app_link",
    }

    def __init__(self, page: Page):
        super().__init__(page)
        self.burger_menu = page.locator(NAVIGATION_LOCATORS["burger_menu"])  # 菜单按钮
        self.close_menu_button = page.locator(NAVIGATION_LOCATORS["close_menu"])  # 菜单关闭按钮
        self.all_items_link = page.locator(NAVIGATION_LOCATORS["all_items_link"])
        self.about_link = page.locator(NAVIGATION_LOCATORS["about_link"])
        self.logout_link = page.locator(NAVIGATION_LOCATORS["logout_link"])
        self.reset_app_link = page.locator(NAVIGATION_LOCATORS["reset_app_link"])
        self.shopping_cart_link = page.locator(NAVIGATION_LOCATORS["shopping_cart_link"])  # 购物车icon
        self.shopping_cart_badge = page.locator(NAVIGATION_LOCATORS["shopping_cart_badge"])  # 购物车角标

    # ================= 菜单 =================
    @allure.step("打开菜单")
    def open_menu(self):
        self.click(self.burger_menu)
        # 菜单有滑出动画，logout 可见才算打开完成
        self.logout_link.wait_for(state="visible")

    @allure.step("关闭菜单")
    def close_menu(self):
        self.click(self.close_menu_button)
        self.logout_link.wait_for(state="hidden")

    @allure.step("退出登录")
    def logout(self):
        self.open_menu()
        self.click(self.logout_link)

    @allure.step("菜单 -> All Items")
    def go_to_all_items(self):
        self.open_menu()
        self.click(self.all_items_link)

    @allure.step("菜单 -> About")
    def open_about(self):
        self.open_menu()
        self.click(self.about_link)

    @allure.step("重置应用状态")
    def reset_app_state(self):
        self.open_menu()
        self.click(self.reset_app_link)
        self.close_menu()

    def is_menu_item_visible(self, name: str) -> bool:
        """name: all_items / about / logout / reset"""
        if name not in self.MENU_ITEMS:
            raise ValueError(f"未知菜单项：{name}")
        return self.is_shown(getattr(self, self.MENU_ITEMS[name]))

    # ================= 购物车 =================
    @allure.step("进入购物车")
    def go_to_cart(self):
        self.click(self.shopping_cart_link)

    def get_cart_badge(self) -> TextResult:
        return self.read_text_result(self.shopping_cart_badge, "shopping-cart-badge")

    def get_cart_item_count(self) -> int:
        # 角标不存在与数量为 0 等价
        try:
            return int(self.get_cart_badge().value_or("0").strip())
        except ValueError:
            return 0

    def is_cart_badge_visible(self) -> bool:
        return self.is_shown(self.shopping_cart_badge)

    def verify_cart_badge_hidden(self):
        expect(self.shopping_cart_badge).to_be_hidden()

    def get_cart_storage_ids(self) -> list[int]:
        """localStorage 中保存的购物车商品 id；没有购物车记录时返回空列表"""
        return json.loads(self.get_local_storage_item(CART_STORAGE_KEY) or "[]")

import re
from dataclasses import dataclass
from decimal import Decimal

import allure
from playwright.sync_api import Page

from assertions.inventory_assert import InventoryAssert
from config.locators import INVENTORY_LOCATORS, add_to_cart_button, remove_button
from config.pages import URLS
from config.settings import ENV
from data.inventory_data import PRODUCT_SORT
from pages.base_page import BasePage
from pages.footer import Footer
from pages.navigation_menu import NavigationMenu
from utils.common_utils import parse_money


@dataclass(frozen=True)
class ProductDetails:
    name: str
    description: str
    price: Decimal


class InventoryPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.nav = NavigationMenu(page)
        self.footer = Footer(page)

        self.cards = page.locator(INVENTORY_LOCATORS["item_product"])  # 商品卡片
        # 卡片内字段，按页面顺序一一对应
        self.card_names = page.locator(INVENTORY_LOCATORS["item_product_name"])
        self.card_prices = page.locator(INVENTORY_LOCATORS["item_product_price"])
        self.card_descriptions = page.locator(INVENTORY_LOCATORS["item_product_desc"])
        self.card_images = page.locator(INVENTORY_LOCATORS["item_product_img"])
        self.sort_select = page.locator(INVENTORY_LOCATORS["product_sort_type"])  # 排序下拉框

    # ================= 页面行为 =================
    def navigate(self, inventory_url: str = URLS[ENV]["inventory"]):
        self.open(inventory_url)
        self.wait_visible(self.cards.first)

    @allure.step("加购商品：{name}")
    def add_item_to_cart(self, name: str):
        self.click(self.page.locator(add_to_cart_button(name)))

    @allure.step("移除商品：{name}")
    def remove_item_from_cart(self, name: str):
        self.click(self.page.locator(remove_button(name)))

    def add_multiple_items_to_cart(self, names: list[str]):
        """先校验全部商品 key，再依次加购；不是原子操作，中途失败时已加购的不会回滚"""
        buttons = [self.page.locator(add_to_cart_button(name)) for name in names]
        for button in buttons:
            self.click(button)

    @allure.step("进入商品详情：{product_name}")
    def click_product_by_name(self, product_name: str):
        exact = re.compile(rf"^\s*{re.escape(product_name)}\s*$")
        self.click(self.card_names.filter(has_text=exact))

    # 选择排序方式：az / za / lohi / hilo
    @allure.step("商品排序：{option}")
    def sort_products(self, option: str):
        if option not in PRODUCT_SORT.values():
            raise ValueError(f"未知排序方式：{option}，可选：{list(PRODUCT_SORT.values())}")
        self.sort_select.select_option(option)

    # ================= 数据获取 =================
    def is_item_in_cart(self, name: str) -> bool:
        # 已加购的商品按钮变为 Remove
        return self.is_shown(self.page.locator(remove_button(name)))

    def get_current_sort_option(self) -> str:
        return self.sort_select.input_value()

    def get_product_count(self) -> int:
        return self.get_count(self.cards)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.card_names)

    def get_product_descriptions(self) -> list[str]:
        return self.get_texts(self.card_descriptions)

    def get_product_image_sources(self) -> list[str]:
        return self.get_attrs(self.card_images, "src")

    def get_product_price_texts(self) -> list[str]:
        return self.get_texts(self.card_prices)

    def get_product_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_product_price_texts()]

    def get_product_details(self, index: int) -> ProductDetails:
        """按位置获取单商品基本信息"""
        card = self.cards.nth(index)
        return ProductDetails(
            name=self.text(card.locator(INVENTORY_LOCATORS["item_product_name"])),
            description=self.text(card.locator(INVENTORY_LOCATORS["item_product_desc"])),
            price=parse_money(self.text(card.locator(INVENTORY_LOCATORS["item_product_price"]))))

    # ========== 基础校验 ==========
    def verify_base_info(self, expect_count: int):
        InventoryAssert.product_count(self.get_product_count(), expect_count)
        InventoryAssert.all_filled("名称", self.get_product_names())
        InventoryAssert.all_filled("描述", self.get_product_descriptions())
        InventoryAssert.all_filled("图片", self.get_product_image_sources())
        InventoryAssert.price_texts(self.get_product_price_texts())
        InventoryAssert.prices_positive(self.get_product_prices())

    def verify_name_asc(self):
        InventoryAssert.sorted_by(self.get_product_names())

    def verify_name_desc(self):
        InventoryAssert.sorted_by(self.get_product_names(), descending=True)

    def verify_price_asc(self):
        InventoryAssert.sorted_by(self.get_product_prices())

    def verify_price_desc(self):
        InventoryAssert.sorted_by(self.get_product_prices(), descending=True)

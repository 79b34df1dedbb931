import allure
import pytest

from data.cart_data import BACKPACK, TWO_PRODUCTS
from data.inventory_data import CART_STORAGE_KEY, PRODUCTS

PRODUCT_IDS = {product.name: product.product_id for product in PRODUCTS.values()}


@pytest.fixture(scope="function")
def inventory_page(pages):
    inventory_page = pages.inventory_page
    inventory_page.navigate()
    return inventory_page


@allure.feature("数据层")
@pytest.mark.ui
@pytest.mark.need_login
class TestCartStorage:

    def test_empty_cart_has_no_storage(self, inventory_page):
        assert inventory_page.get_local_storage_item(CART_STORAGE_KEY) in (None, "[]")
        assert inventory_page.nav.get_cart_storage_ids() == []

    def test_cart_saved_in_local_storage(self, inventory_page):
        """加购后 localStorage 记录对应商品 id"""
        inventory_page.add_multiple_items_to_cart(TWO_PRODUCTS)
        stored = inventory_page.nav.get_cart_storage_ids()
        assert sorted(stored) == sorted(PRODUCT_IDS[name] for name in TWO_PRODUCTS)

    def test_remove_updates_storage(self, inventory_page):
        inventory_page.add_multiple_items_to_cart(TWO_PRODUCTS)
        inventory_page.remove_item_from_cart(BACKPACK)
        assert PRODUCT_IDS[BACKPACK] not in inventory_page.nav.get_cart_storage_ids()
        assert len(inventory_page.nav.get_cart_storage_ids()) == len(TWO_PRODUCTS) - 1

    def test_cart_restored_after_reload(self, inventory_page):
        """刷新后购物车从 localStorage 恢复，角标不变"""
        inventory_page.add_multiple_items_to_cart(TWO_PRODUCTS)
        inventory_page.page.reload()
        inventory_page.wait_visible(inventory_page.cards.first)
        assert inventory_page.nav.get_cart_item_count() == len(TWO_PRODUCTS)
        assert all(inventory_page.is_item_in_cart(name) for name in TWO_PRODUCTS)

    def test_reset_clears_storage(self, inventory_page):
        inventory_page.add_item_to_cart(BACKPACK)
        inventory_page.nav.reset_app_state()
        assert inventory_page.nav.get_cart_storage_ids() == [], "重置后 localStorage 购物车未清空"
        assert inventory_page.nav.get_cart_item_count() == 0

    def test_clear_local_storage_empties_cart(self, inventory_page):
        """清空 localStorage 再刷新：角标消失"""
        inventory_page.add_item_to_cart(BACKPACK)
        inventory_page.clear_local_storage()
        inventory_page.page.reload()
        inventory_page.wait_visible(inventory_page.cards.first)
        inventory_page.nav.verify_cart_badge_hidden()

    def test_cart_written_from_storage(self, inventory_page):
        """直接写入 localStorage 再刷新：页面按存储内容显示购物车"""
        inventory_page.set_local_storage_item(CART_STORAGE_KEY, f"[{PRODUCT_IDS[BACKPACK]}]")
        inventory_page.page.reload()
        inventory_page.wait_visible(inventory_page.cards.first)
        assert inventory_page.nav.get_cart_item_count() == 1
        assert inventory_page.is_item_in_cart(BACKPACK)

    def test_session_storage_clear(self, inventory_page):
        inventory_page.clear_session_storage()
        assert inventory_page.get_session_storage_item("any-key") is None

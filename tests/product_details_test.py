import allure
import pytest

from config.pages import PATHS
from data.inventory_data import PRODUCTS


@pytest.fixture(scope="function")
def details_page(pages):
    details_page = pages.product_details_page
    details_page.navigate(PRODUCTS["backpack"].product_id)
    return details_page


@allure.feature("商品详情")
@pytest.mark.ui
@pytest.mark.need_login
class TestProductDetails:

    @pytest.mark.parametrize("product_key", list(PRODUCTS))
    def test_product_by_id(self, pages, product_key):
        """按 id 打开详情页，显示对应商品"""
        product = PRODUCTS[product_key]
        details_page = pages.product_details_page
        details_page.navigate(product.product_id)
        details = details_page.get_product_details()
        assert details.name == product.name
        assert details.description.strip() != ""
        assert details.price > 0

    def test_add_and_remove(self, details_page):
        """同一个按钮切换加购/移除，状态每次从按钮文案读取"""
        assert not details_page.is_product_in_cart()
        details_page.add_to_cart()
        assert details_page.is_product_in_cart()
        assert details_page.nav.get_cart_item_count() == 1

        details_page.remove_from_cart()
        assert not details_page.is_product_in_cart()
        assert details_page.nav.get_cart_item_count() == 0

    def test_remove_when_not_in_cart(self, details_page):
        """按钮不是 Remove 时移除失败，不会误点加购"""
        with pytest.raises(AssertionError):
            details_page.remove_from_cart()
        assert not details_page.nav.is_cart_badge_visible()

    def test_added_item_shown_on_inventory(self, details_page, pages):
        details_page.add_to_cart()
        details_page.click_back_to_products()
        inventory_page = pages.inventory_page
        inventory_page.wait_url(PATHS["inventory"])
        assert inventory_page.is_item_in_cart(PRODUCTS["backpack"].name)

    def test_back_to_products(self, details_page):
        details_page.click_back_to_products()
        details_page.wait_url(PATHS["inventory"])

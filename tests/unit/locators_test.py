import pytest

from config.locators import (PRODUCT_KEYS, UnknownProductError, add_to_cart_button, product_key,
                             remove_button, slugify)
from config.pages import URLS, product_url
from data.inventory_data import PRODUCT_COUNT, PRODUCT_NAMES, PRODUCTS


@pytest.mark.unit
class TestProductKeys:

    def test_catalog_size(self):
        assert len(PRODUCTS) == len(PRODUCT_KEYS) == PRODUCT_COUNT

    @pytest.mark.parametrize("key", list(PRODUCTS))
    def test_display_name_to_slug(self, key):
        """页面显示名称 slug 化后与 data-test 中的 key 一致"""
        assert product_key(PRODUCTS[key].name) == PRODUCT_NAMES[key]

    def test_slug_is_unchanged(self):
        assert slugify("sauce-labs-backpack") == "sauce-labs-backpack"
        assert slugify("  Sauce Labs Onesie ") == "sauce-labs-onesie"

    def test_builders(self):
        assert add_to_cart_button("Sauce Labs Backpack") == "[data-test='add-to-cart-sauce-labs-backpack']"
        assert remove_button("sauce-labs-bike-light") == "[data-test='remove-sauce-labs-bike-light']"
        assert add_to_cart_button("Test.allTheThings() T-Shirt (Red)") == \
               "[data-test='add-to-cart-test.allthethings()-t-shirt-(red)']"

    @pytest.mark.parametrize("name", ["sauce-labs-backpak", "Sauce Labs", "", "backpack"])
    def test_unknown_product(self, name):
        with pytest.raises(UnknownProductError):
            add_to_cart_button(name)
        with pytest.raises(ValueError):
            remove_button(name)

    def test_product_url(self):
        assert product_url(PRODUCTS["backpack"].product_id) == "https://www.saucedemo.com/inventory-item.html?id=4"
        assert product_url(0, env="prod").startswith(URLS["prod"]["product_details"])

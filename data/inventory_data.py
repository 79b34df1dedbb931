"""inventory功能测试数据：商品目录、排序方式"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    name: str  # 页面显示名称
    product_id: int  # inventory-item.html?id=N


# key 为商品 slug（名称小写、空格转-），与页面 data-test 一致
PRODUCTS = {
    "backpack": Product("Sauce Labs Backpack", 4),
    "bike_light": Product("Sauce Labs Bike Light", 0),
    "bolt_tshirt": Product("Sauce Labs Bolt T-Shirt", 1),
    "fleece_jacket": Product("Sauce Labs Fleece Jacket", 5),
    "onesie": Product("Sauce Labs Onesie", 2),
    "red_tshirt": Product("Test.allTheThings() T-Shirt (Red)", 3),
}

PRODUCT_NAMES = {
    "backpack": "sauce-labs-backpack",
    "bike_light": "sauce-labs-bike-light",
    "bolt_tshirt": "sauce-labs-bolt-t-shirt",
    "fleece_jacket": "sauce-labs-fleece-jacket",
    "onesie": "sauce-labs-onesie",
    "red_tshirt": "test.allthethings()-t-shirt-(red)",
}

PRODUCT_COUNT = 6

# 购物车保存在 localStorage，值为商品 id 的 JSON 数组，如 "[4,0]"
CART_STORAGE_KEY = "cart-contents"

# select 的 value
PRODUCT_SORT = {
    "name_asc": "az",
    "name_desc": "za",
    "price_asc": "lohi",
    "price_desc": "hilo",
}

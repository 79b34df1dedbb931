"""cart功能测试数据：按页面显示名称加购，购物车页按名称校验"""
from data.inventory_data import PRODUCTS

BACKPACK = PRODUCTS["backpack"].name
BIKE_LIGHT = PRODUCTS["bike_light"].name

TWO_PRODUCTS = [BACKPACK, BIKE_LIGHT]
THREE_PRODUCTS = TWO_PRODUCTS + [PRODUCTS["bolt_tshirt"].name]
ALL_PRODUCTS = [product.name for product in PRODUCTS.values()]

from config.settings import ENV

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
}

# 页面路径，同时用作 wait_url 的匹配片段
PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "product_details": "/inventory-item.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

URLS = {
    env: {name: base + path for name, path in PATHS.items()}
    for env, base in BASE_URLS.items()
}

ABOUT_URL_PATTERN = "saucelabs.com"  # About 菜单跳转的外部站点


def product_url(product_id: int, env: str = ENV) -> str:
    """商品详情页：/inventory-item.html?id=N"""
    return f"{URLS[env]['product_details']}?id={product_id}"

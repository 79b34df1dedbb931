from data.inventory_data import PRODUCTS

LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "error_close_button": ".error-button",  # 错误提示关闭按钮
}

NAVIGATION_LOCATORS = {
    "burger_menu": "#react-burger-menu-btn",  # 左上角菜单按钮
    "close_menu": "#react-burger-cross-btn",  # 菜单关闭按钮
    "all_items_link": "#inventory_sidebar_link",  # All Items
    "about_link": "#about_sidebar_link",  # About（外链）
    "logout_link": "#logout_sidebar_link",  # Logout
    "reset_app_link": "#reset_sidebar_link",  # Reset App State
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车角标
}

INVENTORY_LOCATORS = {
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_product_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "item_product_img": ".inventory_item_img img",  # 单商品图片
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
}

PRODUCT_DETAILS_LOCATORS = {
    "back_to_products": "[data-test='back-to-products']",  # 返回商品列表
    "product_name": ".inventory_details_name",  # 商品名称
    "product_desc": ".inventory_details_desc",  # 商品描述
    "product_price": ".inventory_details_price",  # 商品价格
    "cart_toggle_button": ".btn_inventory",  # Add to cart / Remove 共用一个按钮
}

CART_LOCATORS = {
    "cart_item": ".cart_item",  # 购物车商品行
    "cart_item_name": "[data-test='inventory-item-name']",  # 行内商品名称
    "cart_item_price": "[data-test='inventory-item-price']",  # 行内商品价格
    "cart_quantity": ".cart_quantity",  # 行内数量
    "cart_item_button": "button",  # 行内 Remove 按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "container_error_msg": "[data-test='error']",  # Error: First Name is required
    "error_close_button": ".error-button",
    "cancel_button": "[data-test='cancel']",  # 取消按钮（step one / step two 共用）
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 配送信息value
    "products_price": "[data-test='subtotal-label']",  # Item total: $x
    "tax_price": "[data-test='tax-label']",  # Tax: $x
    "order_price": "[data-test='total-label']",  # Total: $x
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout-complete.html---------
    "finish_page_message": "[data-test='complete-header']",  # 完成页面标题
    "finish_page_text": "[data-test='complete-text']",  # 完成页面说明
    "back_home_button": "[data-test='back-to-products']",
}

FOOTER_LOCATORS = {
    "twitter": ".social_twitter",
    "facebook": ".social_facebook",
    "linkedin": ".social_linkedin",
    "copyright": ".footer_copy",
}


# ================== 参数化定位器 ==================
class UnknownProductError(ValueError):
    """商品 key 不在已知商品列表中（一般是拼写错误）"""


def slugify(name: str) -> str:
    """'Sauce Labs Backpack' -> 'sauce-labs-backpack'；已经是 slug 的保持不变"""
    return name.strip().lower().replace(" ", "-")


PRODUCT_KEYS = frozenset(slugify(product.name) for product in PRODUCTS.values())


def product_key(name: str) -> str:
    """商品名称或 slug -> 校验后的 slug"""
    key = slugify(name)
    if key not in PRODUCT_KEYS:
        raise UnknownProductError(f"未知商品：{name!r}，可选：{sorted(PRODUCT_KEYS)}")
    return key


def add_to_cart_button(name: str) -> str:
    return f"[data-test='add-to-cart-{product_key(name)}']"


def remove_button(name: str) -> str:
    return f"[data-test='remove-{product_key(name)}']"

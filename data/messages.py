"""页面文案：错误/成功提示，与被测应用文案保持一致，文案变更需同步修改"""

ERROR_MESSAGES = {
    "locked_out": "Epic sadface: Sorry, this user has been locked out.",
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "required_username": "Epic sadface: Username is required",
    "required_password": "Epic sadface: Password is required",
    "required_first_name": "Error: First Name is required",
    "required_last_name": "Error: Last Name is required",
    "required_postal_code": "Error: Postal Code is required",
    "login_required": "Epic sadface: You can only access '/inventory.html' when you are logged in.",
}

SUCCESS_MESSAGES = {
    "order_complete": "Thank you for your order!",
    "order_dispatched": "Your order has been dispatched, and will arrive just as fast as the pony can get there!",
}

# 完成页判定：标题包含该短语（忽略大小写）
CONFIRMATION_PHRASE = "thank you"

FOOTER_TEXT = "Sauce Labs"

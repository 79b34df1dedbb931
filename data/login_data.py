"""login功能测试用例：测试数据、登录错误提示信息
测试正常登录流程（所有可登录用户）
锁定用户
用户名错误
密码错误
用户名和密码都为空
密码为空
"""
from dataclasses import dataclass

from data.messages import ERROR_MESSAGES

PASSWORD = "secret_sauce"


@dataclass(frozen=True)
class TestUser:
    __test__ = False  # 不是测试类，避免 pytest 收集

    username: str
    password: str
    description: str = ""


TEST_USERS = {
    "standard": TestUser("standard_user", PASSWORD, "Standard user with full access"),
    "locked_out": TestUser("locked_out_user", PASSWORD, "Locked out user - cannot login"),
    "problem": TestUser("problem_user", PASSWORD, "Problem user - has issues with product images and sorting"),
    "performance_glitch": TestUser("performance_glitch_user", PASSWORD,
                                   "Performance glitch user - experiences delays"),
    "error": TestUser("error_user", PASSWORD, "Error user - encounters errors during checkout"),
    "visual": TestUser("visual_user", PASSWORD, "Visual user - for visual testing"),
}

# 能正常登录、跳转到 inventory 的用户（problem/error/... 只作为黑盒账号使用）
STANDARD_ACCESS_USERS = ["standard", "problem", "performance_glitch", "error", "visual"]

LOGIN_FAIL_CASES = {
    "locked_out": {"username": TEST_USERS["locked_out"].username, "password": PASSWORD,
                   "error_msg": ERROR_MESSAGES["locked_out"]},
    "wrong_username": {"username": "invalid_user", "password": PASSWORD,
                       "error_msg": ERROR_MESSAGES["invalid_credentials"]},
    "wrong_password": {"username": "standard_user", "password": "wrong_password",
                       "error_msg": ERROR_MESSAGES["invalid_credentials"]},
    "empty_username": {"username": "", "password": PASSWORD,
                       "error_msg": ERROR_MESSAGES["required_username"]},
    "empty_username_password": {"username": "", "password": "",
                                "error_msg": ERROR_MESSAGES["required_username"]},
    "empty_password": {"username": "standard_user", "password": "",
                       "error_msg": ERROR_MESSAGES["required_password"]},
}

PAGE_TITLE = "Swag Labs"

# 登录成功后写入的 cookie，值为用户名
SESSION_COOKIE = "session-username"

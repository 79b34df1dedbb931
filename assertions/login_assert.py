class LoginAssert:

    @staticmethod
    def error_shown(visible: bool, message: str, expect_msg: str):
        """登录失败：错误提示可见且包含期望文案"""
        assert visible, "登录失败后没有错误提示"
        assert expect_msg in message, f"错误提示「{message}」中没有「{expect_msg}」"

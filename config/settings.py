"""运行配置：全部来自环境变量，导入时读取一次"""
import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


ENV = os.getenv("ENV", "prod")  # 环境：对应 config/pages.py 中的 BASE_URLS

BROWSER = os.getenv("BROWSER", "chromium")  # chromium / firefox / webkit
HEADLESS = _env_bool("HEADLESS", True) or _env_bool("CI", False)  # CI 强制无头
SLOW_MO = _env_int("SLOW_MO", 0)  # 每步操作延迟(ms)，本地调试用

# ========= 超时(ms) =========
DEFAULT_TIMEOUT = _env_int("DEFAULT_TIMEOUT", 10000)  # 每个 context 的默认 action 超时
NAVIGATION_TIMEOUT = _env_int("NAVIGATION_TIMEOUT", 15000)  # 慢用户登录跳转
EXTERNAL_NAVIGATION_TIMEOUT = _env_int("EXTERNAL_NAVIGATION_TIMEOUT", 30000)  # About 外链跳转

# ========= 登录态 =========
STORAGE_DIR = os.getenv("STORAGE_DIR", "storage")
STORAGE_STATE = os.path.join(STORAGE_DIR, "login.json")
LOGIN_STATE_MARGIN = _env_int("LOGIN_STATE_MARGIN", 60)  # 登录 cookie 剩余有效期少于该秒数时重新登录

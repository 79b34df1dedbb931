import json
import time
from pathlib import Path

from playwright.sync_api import Browser, sync_playwright

from config.settings import BROWSER, HEADLESS, LOGIN_STATE_MARGIN, STORAGE_STATE
from data.login_data import SESSION_COOKIE, TEST_USERS
from pages.login_page import LoginPage


def save_login_state(browser: Browser, path: str = STORAGE_STATE):
    """用 standard_user 登录一次，把登录态（cookie/localStorage）保存到 login.json"""
    context = browser.new_context()
    try:
        # 使用 Page Object 登录
        login_page = LoginPage(context.new_page())
        login_page.navigate()
        user = TEST_USERS["standard"]
        login_page.login(user.username, user.password)
        login_page.verify_login_success()

        login_path = Path(path)
        login_path.parent.mkdir(parents=True, exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=login_path)  # 保存登录态到login.json
    finally:
        context.close()

    # 再次校验文件
    if not is_login_state_fresh(login_path):
        raise RuntimeError("‼️ login.json生成失败，请检查浏览器或账号")
    print(f"✅ login.json 已生成 -> {login_path}")


def is_login_state_fresh(path: str = STORAGE_STATE, now: float = None, margin: int = LOGIN_STATE_MARGIN) -> bool:
    """
    login.json 可用：文件能解析，且登录 cookie 在 margin 秒之后仍未过期。
    saucedemo 的登录 cookie 只有十分钟有效期，Playwright 加载登录态时会丢弃过期 cookie
    """
    state_file = Path(path)
    if not state_file.is_file() or state_file.stat().st_size == 0:
        return False
    try:
        cookies = json.loads(state_file.read_text(encoding="utf-8")).get("cookies", [])
    except ValueError:
        return False

    now = time.time() if now is None else now
    for cookie in cookies:
        if cookie.get("name") != SESSION_COOKIE:
            continue
        expires = cookie.get("expires", -1)
        # -1：会话 cookie，没有过期时间
        return expires == -1 or expires > now + margin
    return False


def ensure_login_state(browser: Browser, path: str = STORAGE_STATE) -> str:
    """登录态缺失、损坏或即将过期时重新登录生成，返回 login.json 路径"""
    if is_login_state_fresh(path):
        return str(path)
    print(f"🔐 {path} 不存在或已过期，重新登录生成")
    save_login_state(browser, path)
    return str(path)


if __name__ == "__main__":
    # 单独执行：python -m scripts.save_login_state
    with sync_playwright() as p:
        browser = getattr(p, BROWSER).launch(headless=HEADLESS)
        try:
            save_login_state(browser)
        finally:
            browser.close()

import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.settings import BROWSER, DEFAULT_TIMEOUT, HEADLESS, SLOW_MO, STORAGE_DIR
from pages import Pages
from scripts.save_login_state import ensure_login_state
from utils.attempt_paths import attempt_of, attempt_path

ARTIFACTS = Path("artifacts")  # 失败证据：截图/URL/console/视频/trace
RECORDINGS = Path("recordings")  # 录制中的视频和 trace，用例通过后删除


def evidence_dir(node) -> Path:
    path = ARTIFACTS / attempt_path(node)
    path.mkdir(parents=True, exist_ok=True)
    return path


# ================== session 级 ==================
@pytest.fixture(scope="session", autouse=True)
def fresh_output_dirs():
    """每次运行前清掉上一次的证据、录制和登录态"""
    for folder in (ARTIFACTS, RECORDINGS, Path(STORAGE_DIR)):
        shutil.rmtree(folder, ignore_errors=True)
        folder.mkdir(parents=True)


@pytest.fixture(scope="session")
def pw():
    with sync_playwright() as playwright:
        yield playwright


@pytest.fixture(scope="session")
def browser(pw):
    """整个 session 共用一个浏览器进程"""
    launched = getattr(pw, BROWSER).launch(headless=HEADLESS, slow_mo=SLOW_MO)
    yield launched
    launched.close()


@pytest.fixture(scope="function")
def login_state(browser) -> str:
    """
    need_login 用例的登录态文件：每个用例都检查登录 cookie 是否快过期，
    缺失或快过期时重新登录生成（长时间运行中 cookie 会过期）
    """
    return ensure_login_state(browser)


# ================== 用例级 ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个用例独立 context：
    need_login 用例带上登录态；录制视频和 trace，通过则丢弃，失败则移入 artifacts
    """
    recording = RECORDINGS / attempt_path(request.node)
    recording.mkdir(parents=True, exist_ok=True)

    options = {"record_video_dir": str(recording), "record_video_size": {"width": 1280, "height": 720}}
    if request.node.get_closest_marker("need_login"):
        options["storage_state"] = request.getfixturevalue("login_state")

    ctx = browser.new_context(**options)
    ctx.set_default_timeout(DEFAULT_TIMEOUT)
    ctx.tracing.start(screenshots=True, snapshots=True, sources=True)

    yield ctx

    trace = recording / "trace.zip"
    try:
        ctx.tracing.stop(path=trace)
    finally:
        ctx.close()  # 关闭后视频文件才完整写盘

    if getattr(request.node, "_failed", False):
        keep_recording(request.node, recording)
    shutil.rmtree(recording, ignore_errors=True)


def keep_recording(node, recording: Path):
    """失败用例的视频和 trace 移到证据目录并挂到 allure"""
    target = evidence_dir(node)
    for video in recording.glob("*.webm"):
        moved = shutil.move(str(video), target / video.name)
        allure.attach.file(moved, name="Video", attachment_type=allure.attachment_type.WEBM)
    trace = recording / "trace.zip"
    if trace.exists():
        moved = shutil.move(str(trace), target / trace.name)
        allure.attach.file(moved, name="Playwright-Trace", extension="zip")


@pytest.fixture(scope="function")
def page(context):
    new_page = context.new_page()
    new_page._console_errors = []  # 失败时写入 console_errors.json

    def on_console(message):
        if message.type == "error":
            new_page._console_errors.append({"text": message.text, "location": str(message.location)})

    new_page.on("console", on_console)
    yield new_page
    new_page.close()


@pytest.fixture(scope="function")
def pages(page):
    """当前 page 上的全部页面对象"""
    return Pages(page)


# ================== 失败证据 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """call 阶段失败：保存截图、URL、console 错误并挂到 allure；视频和 trace 在 context teardown 时处理"""
    report = (yield).get_result()
    if report.when != "call" or not report.failed:
        return
    failed_page = item.funcargs.get("page")
    if failed_page is None:
        return  # 单元测试没有浏览器

    item._failed = True
    target = evidence_dir(item)
    print(f"❌ {item.nodeid} attempt {attempt_of(item)} 失败，证据保存在 {target}")

    screenshot = target / "failure.png"
    failed_page.screenshot(path=screenshot, full_page=True)
    (target / "url.txt").write_text(failed_page.url, encoding="utf-8")
    errors = json.dumps(failed_page._console_errors, indent=2, ensure_ascii=False)
    (target / "console_errors.json").write_text(errors, encoding="utf-8")

    allure.attach.file(screenshot, name="Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(failed_page.url, name="URL", attachment_type=allure.attachment_type.URI_LIST)
    allure.attach(errors, name="Console errors", attachment_type=allure.attachment_type.JSON)

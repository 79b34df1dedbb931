from unittest.mock import MagicMock

import pytest


@pytest.fixture(scope="function")
def fake_page():
    """
    不启动浏览器的 Page 替身：同一个 selector 始终返回同一个 locator mock，
    用 fake_page.locators[selector] 设置/检查元素行为
    """
    page = MagicMock(name="page")
    page.locators = {}
    page.locator.side_effect = lambda selector: page.locators.setdefault(selector, MagicMock(name=selector))
    return page

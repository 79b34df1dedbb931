"""失败证据、录制目录的命名：按 模块/类/用例/第几次执行 分层"""
from pathlib import Path


def attempt_of(node) -> int:
    # pytest-rerunfailures 重跑时 execution_count 递增
    return getattr(node, "execution_count", 1)


def attempt_path(node) -> Path:
    """<模块>/<类>/<用例>/attempt_N，不同模块的同名用例互不覆盖"""
    owner = node.cls.__name__ if node.cls else "no_class"
    return Path(node.module.__name__.rsplit(".", 1)[-1]) / owner / node.name / f"attempt_{attempt_of(node)}"

from dataclasses import dataclass


class ElementAbsentError(LookupError):
    """期望存在的元素不存在"""


@dataclass(frozen=True)
class TextResult:
    """
    可选元素的读取结果：区分「元素存在，文本为 value」和「元素不存在」。
    是否把不存在当成默认值（fail-closed）还是报错（fail-open）由调用方决定。
    """
    present: bool
    value: str = ""
    description: str = ""

    @classmethod
    def found(cls, value: str, description: str = "") -> "TextResult":
        return cls(True, value, description)

    @classmethod
    def absent(cls, description: str = "") -> "TextResult":
        return cls(False, "", description)

    def value_or(self, default: str = "") -> str:
        return self.value if self.present else default

    def unwrap(self) -> str:
        if not self.present:
            raise ElementAbsentError(f"元素不存在：{self.description or '<unknown>'}")
        return self.value

import pytest

from utils.element_result import ElementAbsentError, TextResult


@pytest.mark.unit
class TestTextResult:

    def test_found(self):
        result = TextResult.found("3", "badge")
        assert result.present
        assert result.value_or("0") == "3"
        assert result.unwrap() == "3"

    def test_found_empty_text(self):
        """元素存在但文本为空，和元素不存在不同"""
        result = TextResult.found("")
        assert result.present
        assert result.value_or("default") == ""

    def test_absent(self):
        result = TextResult.absent("badge")
        assert not result.present
        assert result.value_or() == ""
        assert result.value_or("0") == "0"
        with pytest.raises(ElementAbsentError, match="badge"):
            result.unwrap()

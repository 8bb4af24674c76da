"""测试 duolog.core.types 模块。"""

import pytest

from duolog.core.types import Category, EmitResult, Level


class TestLevel:
    """测试 Level 枚举。"""

    def test_ordering(self):
        """测试等级按严重度升序排列。"""
        assert Level.DEBUG < Level.INFO < Level.WARNING < Level.ERROR < Level.CRITICAL
        assert [int(level) for level in Level] == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Level.ERROR, Level.ERROR),
            (2, Level.WARNING),
            ("debug", Level.DEBUG),
            ("  Critical ", Level.CRITICAL),
        ],
    )
    def test_parse(self, value, expected):
        """测试从多种输入解析等级。"""
        assert Level.parse(value) is expected

    @pytest.mark.parametrize("value", [7, -1, "SUCCESS", "loud", True, None, 1.0])
    def test_parse_rejects_unknown(self, value):
        """测试无法识别的输入抛出 ValueError。"""
        with pytest.raises(ValueError):
            Level.parse(value)


class TestCategory:
    """测试 Category 枚举。"""

    def test_values_are_tags(self):
        """测试枚举值就是日志行中的标签。"""
        assert {c.value for c in Category} == {
            "DEBUG",
            "INFO",
            "SUCCESS",
            "WARNING",
            "ERROR",
            "CRITICAL",
        }

    def test_ranks(self):
        """测试类别到等级的映射，SUCCESS 与 INFO 相同。"""
        assert Category.DEBUG.rank is Level.DEBUG
        assert Category.INFO.rank is Level.INFO
        assert Category.SUCCESS.rank is Level.INFO
        assert Category.WARNING.rank is Level.WARNING
        assert Category.ERROR.rank is Level.ERROR
        assert Category.CRITICAL.rank is Level.CRITICAL

    def test_parse(self):
        """测试按名称解析类别。"""
        assert Category.parse("success") is Category.SUCCESS
        assert Category.parse(Category.ERROR) is Category.ERROR
        with pytest.raises(ValueError, match="unknown log category"):
            Category.parse("notice")


class TestEmitResult:
    """测试 EmitResult 模型。"""

    def test_defaults(self):
        """测试默认值表示未输出。"""
        result = EmitResult(category=Category.INFO)
        assert result.emitted is False
        assert result.line is None
        assert result.errors == {}
        assert result.ok

    def test_errors_make_result_not_ok(self):
        """测试存在写入错误时 ok 为 False。"""
        result = EmitResult(
            category="ERROR", emitted=True, line="x\n", errors={"file": "OSError: full"}
        )
        assert result.category is Category.ERROR
        assert not result.ok

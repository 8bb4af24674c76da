"""测试 duolog.utils.log 诊断日志。"""

import io

import pytest

from duolog.core.logger import Logger
from duolog.utils.log import configure_logger, get_logger


class BrokenStream:
    def write(self, message):
        raise OSError("no space left on device")


@pytest.fixture
def diagnostics():
    """把诊断日志重定向到内存流，测试后恢复默认配置。"""
    stream = io.StringIO()
    configure_logger(level="DEBUG", sink=stream, colorize=False)
    yield stream
    configure_logger()


class TestDiagnostics:
    """测试诊断日志与 Logger 输出相互隔离。"""

    def test_logger_records_are_not_diagnostics(self, diagnostics, tmp_path):
        """测试 Logger 写出的消息不会出现在诊断日志中。"""
        console = io.StringIO()
        with Logger(log_dir=tmp_path, console=console, colorize=False) as logger:
            logger.info("user message")

        text = diagnostics.getvalue()
        assert "log file opened at" in text
        assert "log file closed at" in text
        assert "user message" not in text
        assert "user message" in console.getvalue()

    def test_write_failure_reported(self, diagnostics, tmp_path):
        """测试写入失败时输出 WARNING 诊断。"""
        with Logger(log_dir=tmp_path, console=BrokenStream(), colorize=False) as logger:
            logger.error("lost on console")

        text = diagnostics.getvalue()
        assert "WARNING" in text
        assert "failed to write log line to console" in text
        assert "no space left on device" in text

    def test_level_filters_diagnostics(self, tmp_path):
        """测试诊断等级过滤 DEBUG 信息。"""
        stream = io.StringIO()
        configure_logger(level="WARNING", sink=stream, colorize=False)
        try:
            with Logger(log_dir=tmp_path, console=io.StringIO()):
                pass
            assert stream.getvalue() == ""
        finally:
            configure_logger()

    def test_reconfigure_replaces_handler(self, diagnostics):
        """测试重复配置只保留一个诊断处理器。"""
        second = io.StringIO()
        configure_logger(level="DEBUG", sink=second, colorize=False)

        get_logger("tests").info("only once")

        assert "only once" in second.getvalue()
        assert "only once" not in diagnostics.getvalue()

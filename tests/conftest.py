"""测试共用的 fixture。"""

import io
from datetime import datetime

import pytest

from duolog.core.logger import Logger
from duolog.core.types import Level

FIXED_TIME = datetime(2024, 3, 5, 14, 7, 22)


@pytest.fixture
def console():
    """替代标准输出的内存流。"""
    return io.StringIO()


@pytest.fixture
def make_logger(tmp_path, console):
    """创建写入临时目录的 Logger，测试结束后统一关闭。"""
    created = []

    def factory(level=Level.DEBUG, **kwargs):
        kwargs.setdefault("log_dir", tmp_path / "logs")
        kwargs.setdefault("console", console)
        kwargs.setdefault("colorize", False)
        kwargs.setdefault("clock", lambda: FIXED_TIME)
        logger = Logger(level, **kwargs)
        created.append(logger)
        return logger

    yield factory

    for logger in created:
        logger.close()

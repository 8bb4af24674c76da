"""duolog 自身的诊断日志（基于 loguru）。

设计目标：
- 彩色、易读的 stderr 输出，仅用于库内部诊断（文件创建、写入失败等）
- 不触碰宿主程序的全局 `loguru.logger`：诊断与每个 Logger 实例都使用独立的 core
- 可重复配置，重新配置只影响诊断 logger 自己的处理器
"""

from __future__ import annotations

from typing import Any, Optional, TextIO
import sys

from loguru._logger import Core as _Core, Logger as _Logger

_DIAGNOSTIC_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def new_logger() -> Any:
    """创建一个拥有独立 core（独立处理器集合）的 loguru logger。

    构造方式与 `loguru.logger` 本身相同，只是不共享全局 core：
    宿主对 `loguru.logger` 的 add/remove 不会影响这里，反之亦然。
    """
    return _Logger(
        core=_Core(),
        exception=None,
        depth=0,
        record=False,
        lazy=False,
        colors=False,
        raw=False,
        capture=True,
        patchers=[],
        extra={},
    )


_logger = new_logger()


def configure_logger(
    *,
    level: str = "WARNING",
    sink: Optional[TextIO] = None,
    colorize: Optional[bool] = None,
    backtrace: bool = True,
    diagnose: bool = False,
) -> Any:
    """配置并返回 duolog 的诊断 logger。"""

    # 移除已存在的处理器以避免重复输出（仅限诊断 logger 自己的 core）
    _logger.remove()

    # 同步写入（enqueue=False），诊断信息与 Logger 输出保持先后顺序
    _logger.add(
        sink if sink is not None else sys.stderr,
        colorize=colorize,
        format=_DIAGNOSTIC_FORMAT,
        level=level.upper(),
        enqueue=False,
        backtrace=backtrace,
        diagnose=diagnose,
    )
    return _logger


# 默认配置好的 logger 实例
logger = configure_logger()


def get_logger(name: Optional[str] = None):
    """返回带有指定名称绑定（name）的子 logger。"""
    if name:
        return logger.bind(name=name)
    return logger

"""duolog：分级、带时间戳、彩色的控制台 + 文件双路日志。"""

from .core import (
    Category,
    DuologError,
    EmitResult,
    Level,
    Logger,
    LoggerInitError,
    new,
)

__all__ = [
    "Category",
    "EmitResult",
    "Level",
    "Logger",
    "new",
    "DuologError",
    "LoggerInitError",
]

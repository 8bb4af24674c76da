"""duolog.core 包。

围绕单一的 `Logger` 类型：按等级过滤消息，加上时间戳与类别标签，
为控制台着色，并同时写入控制台与本次运行的日志文件。
"""

from .base import DuologError, LoggerInitError
from .logger import Logger, new
from .types import Category, EmitResult, Level

__all__ = [
    "Category",
    "EmitResult",
    "Level",
    "Logger",
    "new",
    "DuologError",
    "LoggerInitError",
]

"""duolog 的诊断日志工具模块。

基于 loguru，特性包括：
- 彩色 stderr 输出
- 独立的 loguru core，不影响宿主程序的全局 logger
"""

from .logger import configure_logger, get_logger, logger, new_logger

__all__ = ["logger", "configure_logger", "get_logger", "new_logger"]

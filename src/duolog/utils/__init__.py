"""
duolog.utils 包

库内部复用的工具集合，目前只有诊断日志。
"""

# 便捷导出
from .log import logger as logger

__all__ = ["logger"]

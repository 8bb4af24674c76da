"""日志配置适配器。

本模块负责把 `Settings` 中的字段映射为 `duolog.core.Logger` 与
`duolog.utils.log.configure_logger` 可接受的参数。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from duolog.config.settings import Settings, get_settings
from duolog.core.logger import Logger


def map_settings_to_logger_kwargs(settings: Settings) -> Dict[str, Any]:
    """把 Settings 映射为传给 Logger 的关键字参数字典。"""
    return {
        "level": settings.level,
        "log_dir": settings.log_dir,
        "colorize": settings.colorize,
        "critical_exit_code": settings.critical_exit_code,
    }


def new_logger_from_settings(settings: Optional[Settings] = None, **overrides: Any) -> Logger:
    """按 settings 创建 Logger，overrides 中的参数（如 console、clock）优先。

    如果未传入 settings，会使用 `get_settings()` 获取单例。
    """
    if settings is None:
        settings = get_settings()

    kwargs = map_settings_to_logger_kwargs(settings)
    kwargs.update(overrides)
    return Logger(**kwargs)


def apply_logging_from_settings(settings: Optional[Settings] = None) -> None:
    """从 settings 加载并应用诊断日志配置，可重复调用。"""
    if settings is None:
        settings = get_settings()

    # 延迟导入日志模块，便于测试时 patch
    from duolog.utils.log import configure_logger

    configure_logger(level=settings.diagnostics_level)


__all__ = [
    "map_settings_to_logger_kwargs",
    "new_logger_from_settings",
    "apply_logging_from_settings",
]

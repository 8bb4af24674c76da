"""应用配置（基于 pydantic-settings）。

包含 Logger 的默认参数与诊断日志等级（环境变量优先）。
"""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from duolog.core.types import Level

_DIAGNOSTIC_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """应用配置模型（可通过环境变量注入）。

    环境变量前缀：DUOLOG_
    例如 DUOLOG_LEVEL=WARNING
    """

    # Logger 相关
    level: str = "INFO"
    log_dir: str = "logs"
    # None 表示仅在控制台为 TTY 时着色
    colorize: Optional[bool] = None
    critical_exit_code: int = 1

    # duolog 自身诊断日志
    diagnostics_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="DUOLOG_")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证等级名并统一为大写。"""
        return Level.parse(v).name

    @field_validator("diagnostics_level")
    @classmethod
    def validate_diagnostics_level(cls, v: str) -> str:
        name = v.strip().upper()
        if name not in _DIAGNOSTIC_LEVELS:
            raise ValueError(f"unknown diagnostics level: {v!r}")
        return name


# module-level cached settings
_SETTINGS: Optional[Settings] = None


def get_settings(force_reload: bool = False) -> Settings:
    """返回全局 Settings 单例（按需从环境加载）。

    如果 force_reload=True，会从环境/来源重新创建实例。
    """

    global _SETTINGS
    if _SETTINGS is None or force_reload:
        _SETTINGS = Settings()
    return _SETTINGS


__all__ = ["Settings", "get_settings"]

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field


class Level(IntEnum):
    """最低输出等级（严重度排名）。

    数值越大越严重，低于当前等级的消息会被丢弃。
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        """把 Level / 整数排名 / 等级名（不区分大小写）统一转换为 Level。"""
        if isinstance(value, cls):
            return value
        # bool 是 int 的子类，这里显式排除
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"unknown log level rank: {value}") from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            raise ValueError(f"unknown log level name: {value!r}")
        raise ValueError(f"unsupported log level value: {value!r}")


class Category(str, Enum):
    """消息类别，即写入日志行中的标签。"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> Level:
        # SUCCESS 与 INFO 共用同一个门限
        return _CATEGORY_RANKS[self]

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"unknown log category: {value!r}") from None


_CATEGORY_RANKS: Dict[Category, Level] = {
    Category.DEBUG: Level.DEBUG,
    Category.INFO: Level.INFO,
    Category.SUCCESS: Level.INFO,
    Category.WARNING: Level.WARNING,
    Category.ERROR: Level.ERROR,
    Category.CRITICAL: Level.CRITICAL,
}


class EmitResult(BaseModel):
    """一次写日志调用的结果。

    - `emitted` 为 False 表示消息被等级门限过滤，没有产生任何输出。
    - `line` 是写入文件的纯文本行（不含颜色控制码）。
    - `errors` 记录写入失败的目标（sink 名 -> 错误描述），全部成功时为空。
    """

    category: Category
    emitted: bool = False
    line: Optional[str] = None
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


__all__ = ["Level", "Category", "EmitResult"]

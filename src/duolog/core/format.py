from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Tuple

from .types import Category

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# 控制台颜色表（loguru 标记语法），只影响控制台，文件输出会去掉这些标记
CONSOLE_STYLES: Dict[Category, Tuple[str, ...]] = {
    Category.DEBUG: ("white",),
    Category.INFO: ("cyan",),
    Category.SUCCESS: ("green",),
    Category.WARNING: ("yellow",),
    Category.ERROR: ("red",),
    # 黑字红底
    Category.CRITICAL: ("black", "RED"),
}


def format_timestamp(moment: datetime) -> str:
    """本地时间戳，格式 YYYY-MM-DD HH:MM:SS。"""

    return moment.strftime(TIMESTAMP_FORMAT)


def log_file_name(moment: datetime) -> str:
    """由构造时间生成日志文件名，冒号替换为下划线以兼容各类文件系统。"""

    return format_timestamp(moment).replace(":", "_") + ".log"


def normalize_message(message: str) -> str:
    """去掉消息末尾的换行，渲染时统一补一个。"""

    return message.rstrip("\n")


def render_line(stamp: str, category: Category, message: str) -> str:
    """渲染一行纯文本日志：`[时间] [类别]: 消息`，且以恰好一个换行结尾。"""

    return f"[{stamp}] [{category.value}]: {normalize_message(message)}\n"


def line_format(record: Dict[str, Any]) -> str:
    """loguru 的 format 回调。

    控制台与文件共用同一个模板：文件 sink 关闭 colorize 后 loguru 会剥离颜色标记，
    因此两边除颜色控制码外逐字节一致。颜色在换行前关闭，不会泄漏到其他输出。
    """

    tags = CONSOLE_STYLES[Category.parse(record["level"].name)]
    opening = "".join(f"<{tag}>" for tag in tags)
    closing = "</>" * len(tags)
    return opening + "[{extra[stamp]}] [{level}]: {message}" + closing + "\n"


def join_print(*args: Any) -> str:
    """按 print 风格拼接参数：仅当相邻两个参数都不是字符串时才插入空格。"""

    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


def join_println(*args: Any) -> str:
    """参数之间总是插入空格，并在末尾追加换行。"""

    return " ".join(str(arg) for arg in args) + "\n"


def join_printf(fmt: str, *args: Any) -> str:
    """printf 风格（`%`）格式化。

    单个 Mapping 参数用于命名占位符，例如 `join_printf("%(n)d", {"n": 1})`。
    无论有没有参数都会做一次 % 格式化，`%%` 总是输出为 `%`；
    格式串与参数不匹配时抛出 TypeError / ValueError。
    """

    if len(args) == 1 and isinstance(args[0], Mapping):
        return fmt % args[0]
    return fmt % args


__all__ = [
    "TIMESTAMP_FORMAT",
    "CONSOLE_STYLES",
    "format_timestamp",
    "log_file_name",
    "normalize_message",
    "render_line",
    "line_format",
    "join_print",
    "join_println",
    "join_printf",
]

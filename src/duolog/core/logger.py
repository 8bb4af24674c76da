"""分级、带时间戳的双路日志器。

每条消息同时写入控制台（彩色）与本次运行独占的日志文件：

    [YYYY-MM-DD HH:MM:SS] [CATEGORY]: message

两路输出各自是一个独立 loguru core 上的唯一处理器，不经过全局 `loguru.logger`，
因此多个 Logger 实例之间、与宿主程序的 loguru 配置之间、以及与 duolog 自身的
诊断日志之间互不干扰。
"""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime
from typing import Any, Callable, Dict, NoReturn, Optional, TextIO, Union

from duolog.utils.log import get_logger, new_logger

from .base import LoggerInitError
from .format import (
    format_timestamp,
    join_print,
    join_printf,
    join_println,
    line_format,
    log_file_name,
    normalize_message,
    render_line,
)
from .types import Category, EmitResult, Level

_diag = get_logger(__name__)

LevelLike = Union[Level, int, str]


class Logger:
    """线程安全的控制台 + 文件日志器。

    - 构造时确保 `log_dir` 存在，并以构造时刻命名创建日志文件；失败抛出 LoggerInitError。
    - `log` 只负责输出，从不结束进程；`critical*` 系列在输出后显式调用 `terminate`。
    - 写入失败不会中断另一路输出，失败信息记录在返回的 EmitResult.errors 中。
    """

    def __init__(
        self,
        level: LevelLike = Level.INFO,
        *,
        log_dir: Union[str, "os.PathLike[str]"] = "logs",
        console: Optional[TextIO] = None,
        colorize: Optional[bool] = None,
        critical_exit_code: int = 1,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._level = Level.parse(level)
        self._critical_exit_code = critical_exit_code
        self._clock = clock or datetime.now
        self._console = console if console is not None else sys.stdout
        self._sinks: Dict[str, Any] = {}
        self._closed = False

        directory = os.fspath(log_dir)
        self.path = os.path.join(directory, log_file_name(self._clock()))
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            raise LoggerInitError(self.path, str(exc)) from exc

        self._attach("console", self._console, colorize=colorize)
        try:
            # 追加模式、行缓冲：每行写完即落盘
            self._attach(
                "file",
                self.path,
                colorize=False,
                mode="a",
                buffering=1,
                encoding="utf-8",
            )
        except OSError as exc:
            self.close()
            raise LoggerInitError(self.path, str(exc)) from exc

        _diag.debug("log file opened at {}", self.path)

    def _attach(self, name: str, sink: Any, **options: Any) -> None:
        # 每一路输出独占一个 core，core 上只有这一个处理器
        sink_logger = new_logger()
        sink_logger.add(
            sink,
            format=line_format,
            level=0,
            enqueue=False,
            catch=False,
            backtrace=False,
            diagnose=False,
            **options,
        )
        self._sinks[name] = sink_logger

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(level={self._level.name}, path={self.path!r})"

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @property
    def closed(self) -> bool:
        return self._closed

    def set_level(self, level: LevelLike) -> None:
        """修改最低输出等级，对之后的调用生效。"""
        parsed = Level.parse(level)
        with self._lock:
            self._level = parsed

    def log(self, message: str, category: Union[Category, str]) -> EmitResult:
        """按类别写出一条消息。

        整个调用持有锁：门限判断、渲染和两路写入串行执行，多线程下各行不会交错。
        被门限过滤时不产生任何输出（包括颜色控制码）。
        """
        category = Category.parse(category)
        errors: Dict[str, str] = {}
        with self._lock:
            if self._closed or self._level > category.rank:
                return EmitResult(category=category)

            # 时间戳只取一次，保证两路输出一致
            stamp = format_timestamp(self._clock())
            body = normalize_message(str(message))
            for name, sink in self._sinks.items():
                try:
                    sink.bind(stamp=stamp).log(category.value, body)
                except (OSError, ValueError) as exc:
                    errors[name] = f"{type(exc).__name__}: {exc}"
            line = render_line(stamp, category, body)

        if errors:
            _diag.warning("failed to write log line to {}: {}", ", ".join(errors), errors)
        return EmitResult(category=category, emitted=True, line=line, errors=errors)

    def terminate(self) -> NoReturn:
        """以 critical_exit_code 结束整个进程。

        主线程中抛出 SystemExit，正常走解释器的退出流程；
        其他线程中的 SystemExit 只会结束该线程，因此先刷新输出再调用 os._exit。
        """
        if threading.current_thread() is threading.main_thread():
            raise SystemExit(self._critical_exit_code)

        for stream in (self._console, sys.stdout, sys.stderr):
            flush = getattr(stream, "flush", None)
            if flush is not None:
                try:
                    flush()
                except (OSError, ValueError):
                    # 进程马上退出，刷新失败无从处理
                    pass
        os._exit(self._critical_exit_code)

    def close(self) -> None:
        """移除本实例的处理器并关闭日志文件，可重复调用。"""
        with self._lock:
            sinks, self._sinks = self._sinks, {}
            self._closed = True

        for sink_logger in sinks.values():
            sink_logger.remove()
        if sinks:
            _diag.debug("log file closed at {}", self.path)

    # 便捷方法：X(*args) 按 print 拼接，Xln(*args) 以空格拼接并换行，Xf(fmt, *args) 使用 % 格式化

    def debug(self, *args: Any) -> EmitResult:
        return self.log(join_print(*args), Category.DEBUG)

    def debugln(self, *args: Any) -> EmitResult:
        return self.log(join_println(*args), Category.DEBUG)

    def debugf(self, fmt: str, *args: Any) -> EmitResult:
        return self.log(join_printf(fmt, *args), Category.DEBUG)

    def info(self, *args: Any) -> EmitResult:
        return self.log(join_print(*args), Category.INFO)

    def infoln(self, *args: Any) -> EmitResult:
        return self.log(join_println(*args), Category.INFO)

    def infof(self, fmt: str, *args: Any) -> EmitResult:
        return self.log(join_printf(fmt, *args), Category.INFO)

    def success(self, *args: Any) -> EmitResult:
        return self.log(join_print(*args), Category.SUCCESS)

    def successln(self, *args: Any) -> EmitResult:
        return self.log(join_println(*args), Category.SUCCESS)

    def successf(self, fmt: str, *args: Any) -> EmitResult:
        return self.log(join_printf(fmt, *args), Category.SUCCESS)

    def warning(self, *args: Any) -> EmitResult:
        return self.log(join_print(*args), Category.WARNING)

    def warningln(self, *args: Any) -> EmitResult:
        return self.log(join_println(*args), Category.WARNING)

    def warningf(self, fmt: str, *args: Any) -> EmitResult:
        return self.log(join_printf(fmt, *args), Category.WARNING)

    def error(self, *args: Any) -> EmitResult:
        return self.log(join_print(*args), Category.ERROR)

    def errorln(self, *args: Any) -> EmitResult:
        return self.log(join_println(*args), Category.ERROR)

    def errorf(self, fmt: str, *args: Any) -> EmitResult:
        return self.log(join_printf(fmt, *args), Category.ERROR)

    def critical(self, *args: Any) -> NoReturn:
        self.log(join_print(*args), Category.CRITICAL)
        self.terminate()

    def criticalln(self, *args: Any) -> NoReturn:
        self.log(join_println(*args), Category.CRITICAL)
        self.terminate()

    def criticalf(self, fmt: str, *args: Any) -> NoReturn:
        self.log(join_printf(fmt, *args), Category.CRITICAL)
        self.terminate()


def new(level: LevelLike = Level.INFO, **kwargs: Any) -> Logger:
    """创建 Logger 的便捷函数，参数同 Logger。

    不读取 DUOLOG_* 环境变量；需要按环境配置时使用 `duolog.config.log.new_logger_from_settings`。
    """
    return Logger(level, **kwargs)


__all__ = ["Logger", "new"]

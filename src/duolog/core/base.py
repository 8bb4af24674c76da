from __future__ import annotations


class DuologError(Exception):
    """duolog 通用错误类型。"""


class LoggerInitError(DuologError):
    """日志目录或日志文件无法创建。

    初始化失败被视为不可恢复：调用方不捕获时进程直接退出，并把底层错误展示给使用者。
    """

    def __init__(self, path: str, detail: str):
        super().__init__(f"cannot initialize log file '{path}': {detail}")
        self.path = path
        self.detail = detail


__all__ = ["DuologError", "LoggerInitError"]

# common/logger/print_logger.py

"""
Minimal logger writing straight to stdout, useful for scripts.
"""

import sys
import traceback
from datetime import datetime, timezone

from .logger_interface import LoggerInterface, LogLevel


class PrintLogger(LoggerInterface):
    """Logger that prints formatted lines to stdout"""

    def _emit(self, level: LogLevel, message: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            message = message % args
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        print(
            f"{timestamp} | {level.value:<8} | {self.name} | {message}",
            file=sys.stdout,
        )

    def debug(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.ERROR, message, *args)

    def critical(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.CRITICAL, message, *args)

    def exception(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.ERROR, message, *args)
        if self.is_enabled_for(LogLevel.ERROR):
            traceback.print_exc(file=sys.stdout)

# common/logger/standard_logger.py

"""
Logger backed by the standard ``logging`` module with colored console output.
"""

import logging
from pathlib import Path
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console

from .logger_interface import LoggerInterface, LogLevel

_LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
}

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output"""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return message.replace(
            record.levelname, f"{color}{record.levelname}{Style.RESET_ALL}", 1
        )


class StandardLogger(LoggerInterface):
    """LoggerInterface implementation on top of ``logging.Logger``"""

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        fmt: str = DEFAULT_FORMAT,
    ):
        """
        Initialize standard logger

        Args:
            name: Logger name
            level: Base level of the logger
            console_level: Level of the console handler (defaults to ``level``)
            file_level: Level of the file handler (defaults to ``level``)
            log_file: Optional path of a log file, parent directories are created
            use_colors: Color the level name on the console
            fmt: Log record format
        """
        super().__init__(name, level)
        self._logger = logging.getLogger(name)
        self._logger.propagate = False

        # The logger level must admit the most verbose handler
        handler_levels = [level, console_level or level]
        if log_file:
            handler_levels.append(file_level or level)
        self._logger.setLevel(
            min(lvl.to_logging_level() for lvl in handler_levels)
        )

        # Handlers are attached once per underlying logger name
        if not self._logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel((console_level or level).to_logging_level())
            console_handler.setFormatter(
                ColoredFormatter(fmt) if use_colors else logging.Formatter(fmt)
            )
            self._logger.addHandler(console_handler)

            if log_file:
                log_path = Path(log_file)
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_path, encoding="utf-8")
                file_handler.setLevel((file_level or level).to_logging_level())
                file_handler.setFormatter(logging.Formatter(fmt))
                self._logger.addHandler(file_handler)

    @property
    def handlers(self):
        return list(self._logger.handlers)

    def set_level(self, level: LogLevel) -> None:
        super().set_level(level)
        self._logger.setLevel(level.to_logging_level())

    def debug(self, message: str, *args, **kwargs) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self._logger.critical(message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self._logger.exception(message, *args, **kwargs)

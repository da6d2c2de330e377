# common/logger/logger_interface.py

"""
Logger interface shared by all logger implementations.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Map to the numeric level used by the ``logging`` module."""
        return getattr(logging, self.value)


class LoggerInterface(ABC):
    """Abstract interface for loggers handed out by LoggerFactory"""

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        self.name = name
        self.level = level

    @abstractmethod
    def debug(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, message: str, *args, **kwargs) -> None:
        """Log an error message together with the active exception."""
        pass

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.to_logging_level() >= self.level.to_logging_level()

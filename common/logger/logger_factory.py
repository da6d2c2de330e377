# common/logger/logger_factory.py

"""
Factory returning cached logger instances by name.
"""

import threading
from enum import Enum
from typing import Dict, Optional

from .logger_interface import LoggerInterface, LogLevel
from .print_logger import PrintLogger
from .standard_logger import StandardLogger


class LoggerType(str, Enum):
    STANDARD = "standard"
    PRINT = "print"


class LoggerFactory:
    """Creates and caches loggers so each name is configured only once"""

    _loggers: Dict[str, LoggerInterface] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        log_file: Optional[str] = None,
        use_colors: bool = True,
    ) -> LoggerInterface:
        """
        Get or create a logger

        Args:
            name: Logger name, also the cache key
            logger_type: Implementation to create
            level: Base log level
            console_level: Console handler level (standard logger only)
            file_level: File handler level (standard logger only)
            log_file: Optional log file path (standard logger only)
            use_colors: Colored console output (standard logger only)

        Returns:
            LoggerInterface: Cached logger for ``name``
        """
        with cls._lock:
            existing = cls._loggers.get(name)
            if existing is not None:
                return existing

            if logger_type == LoggerType.PRINT:
                logger: LoggerInterface = PrintLogger(name=name, level=level)
            elif logger_type == LoggerType.STANDARD:
                logger = StandardLogger(
                    name=name,
                    level=level,
                    console_level=console_level,
                    file_level=file_level,
                    log_file=log_file,
                    use_colors=use_colors,
                )
            else:
                raise ValueError(f"Unsupported logger type: {logger_type}")

            cls._loggers[name] = logger
            return logger

    @classmethod
    def clear(cls) -> None:
        """Forget all cached loggers"""
        with cls._lock:
            cls._loggers.clear()

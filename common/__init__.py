"""
Nearby News Common Module

Shared utilities for the Nearby News platform. Currently this is the logging
layer used by every service module.

Usage:
    from common.logger import LoggerFactory, LoggerType, LogLevel
"""

__version__ = "0.1.0"
__author__ = "Nearby News Team"

from .logger import LoggerFactory, LoggerType, LogLevel

__all__ = [
    "__version__",
    "LoggerFactory",
    "LoggerType",
    "LogLevel",
]

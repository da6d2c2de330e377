# core/__init__.py

"""
Core configuration, errors and domain rules.
"""

from .config import Settings, settings

__all__ = [
    "settings",
    "Settings",
]

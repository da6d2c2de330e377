# routers/__init__.py

"""
REST API routers.
"""

from . import location_router, news_router

__all__ = [
    "news_router",
    "location_router",
]

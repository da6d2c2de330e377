# __init__.py
"""
Nearby News Service - location-aware news sharing backend.
"""

__version__ = "1.0.0"
__title__ = "Nearby News Service"
__description__ = (
    "Post short news items tagged with a location and query items near you"
)

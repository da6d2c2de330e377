# core/retention.py

"""
Retention rule for news items and location pings.

Every record expires ``ttl`` after its timestamp. An item whose age is exactly
``ttl`` is already expired, so live records satisfy ``timestamp > cutoff``.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

DEFAULT_TTL = timedelta(days=7)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by MongoDB) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class RetentionPolicy:
    """Fixed time-to-live policy"""

    def __init__(self, ttl: timedelta = DEFAULT_TTL):
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self.ttl = ttl

    @classmethod
    def from_days(cls, days: int) -> "RetentionPolicy":
        return cls(ttl=timedelta(days=days))

    @property
    def ttl_seconds(self) -> int:
        return int(self.ttl.total_seconds())

    def expires_at(self, created_at: datetime) -> datetime:
        return ensure_utc(created_at) + self.ttl

    def cutoff(self, now: Optional[datetime] = None) -> datetime:
        """Timestamps at or before the returned instant are expired."""
        return ensure_utc(now or utc_now()) - self.ttl

    def is_expired(self, created_at: datetime, now: Optional[datetime] = None) -> bool:
        return ensure_utc(now or utc_now()) >= self.expires_at(created_at)

# tests/test_retention.py

"""
Tests for the retention policy.
"""

from datetime import datetime, timedelta, timezone

import pytest

from nearby_news.core.retention import RetentionPolicy, ensure_utc

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestRetentionPolicy:
    """Test cases for RetentionPolicy."""

    def test_default_ttl_is_seven_days(self):
        policy = RetentionPolicy()
        assert policy.ttl == timedelta(days=7)
        assert policy.ttl_seconds == 604800

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            RetentionPolicy(ttl=timedelta(0))

    def test_six_days_old_is_live(self):
        policy = RetentionPolicy.from_days(7)
        assert policy.is_expired(NOW - timedelta(days=6), NOW) is False

    def test_exactly_seven_days_old_is_expired(self):
        policy = RetentionPolicy.from_days(7)
        assert policy.is_expired(NOW - timedelta(days=7), NOW) is True

    def test_just_under_seven_days_is_live(self):
        policy = RetentionPolicy.from_days(7)
        created = NOW - timedelta(days=7) + timedelta(microseconds=1)
        assert policy.is_expired(created, NOW) is False

    def test_eight_days_old_is_expired(self):
        policy = RetentionPolicy.from_days(7)
        assert policy.is_expired(NOW - timedelta(days=8), NOW) is True

    def test_expiry_is_monotonic(self):
        policy = RetentionPolicy.from_days(1)
        created = NOW - timedelta(hours=30)
        assert policy.is_expired(created, NOW)
        assert policy.is_expired(created, NOW + timedelta(days=365))

    def test_cutoff(self):
        policy = RetentionPolicy.from_days(7)
        assert policy.cutoff(NOW) == NOW - timedelta(days=7)
        assert policy.expires_at(NOW) == NOW + timedelta(days=7)

    def test_naive_datetimes_treated_as_utc(self):
        naive = datetime(2024, 1, 8, 12, 0)
        assert ensure_utc(naive) == datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc)
        assert RetentionPolicy.from_days(7).is_expired(naive, NOW) is True

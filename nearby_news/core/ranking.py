# core/ranking.py

"""
Ordering and pagination of proximity candidates.

Both sort keys break ties down to the item id so that identical queries over
identical data always produce the same order, which keeps pages stable.
"""

import math
from typing import List, Sequence

from ..schemas.news_schemas import ProximityCandidate, SortKey
from .retention import ensure_utc


def _timestamp(candidate: ProximityCandidate) -> float:
    return ensure_utc(candidate.item.created_at).timestamp()


def sort_candidates(
    candidates: Sequence[ProximityCandidate], sort: SortKey
) -> List[ProximityCandidate]:
    """
    Order candidates for display.

    distance: nearest first, then newest first, then id
    recency: newest first, then nearest first, then id
    """
    if sort == SortKey.RECENCY:
        key = lambda c: (-_timestamp(c), c.distance_meters, c.item.id or "")
    else:
        key = lambda c: (c.distance_meters, -_timestamp(c), c.item.id or "")
    return sorted(candidates, key=key)


def count_pages(total_matches: int, limit: int) -> int:
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return math.ceil(total_matches / limit)


def paginate(
    ranked: Sequence[ProximityCandidate], page: int, limit: int
) -> List[ProximityCandidate]:
    """Return the ``[(page-1)*limit, page*limit)`` slice."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be at least 1")
    start = (page - 1) * limit
    return list(ranked[start : start + limit])

# services/proximity_query_service.py

"""
Proximity query engine: validate, collect candidates, rank, paginate.
"""

from typing import Any, Callable, Mapping, Optional
from datetime import datetime

from ..core.exceptions import ValidationError
from ..core.ranking import count_pages, paginate, sort_candidates
from ..core.retention import RetentionPolicy, utc_now
from ..interfaces.news_repository_interface import NewsRepositoryInterface
from ..schemas.news_schemas import NearbyNewsResult, NearbyQuery
from ..utils.validation import (
    DEFAULT_MAX_PAGE_LIMIT,
    DEFAULT_MAX_RADIUS_METERS,
    DEFAULT_PAGE_LIMIT,
    validate_nearby_query,
)
from common.logger import LoggerFactory, LoggerType, LogLevel


class ProximityQueryService:
    """Answers "news near me" queries as a single read-only operation"""

    def __init__(
        self,
        repository: NewsRepositoryInterface,
        retention_policy: Optional[RetentionPolicy] = None,
        max_radius_meters: float = DEFAULT_MAX_RADIUS_METERS,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = DEFAULT_MAX_PAGE_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.retention_policy = retention_policy or RetentionPolicy()
        self.max_radius_meters = max_radius_meters
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.clock = clock
        self.logger = LoggerFactory.get_logger(
            name="proximity-query-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/proximity_query_service.log",
        )

    def validate(self, params: Mapping[str, Any]) -> NearbyQuery:
        return validate_nearby_query(
            params,
            max_radius_meters=self.max_radius_meters,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )

    async def execute(self, params: Mapping[str, Any]) -> NearbyNewsResult:
        """
        Validate raw parameters and run the query

        Args:
            params: Raw ``lat``, ``lng``, ``radius``, ``sort``, ``page``, ``limit``

        Returns:
            NearbyNewsResult: Requested page and totals

        Raises:
            ValidationError: Invalid parameters, the store is not queried
            StorageFailureError: The store or index failed
        """
        try:
            query = self.validate(params)
        except ValidationError as e:
            self.logger.warning(f"Rejected nearby query: {e.code}: {e.message}")
            raise
        return await self.run(query)

    async def run(
        self, query: NearbyQuery, now: Optional[datetime] = None
    ) -> NearbyNewsResult:
        """Run an already validated query"""
        now = now or self.clock()
        cutoff = self.retention_policy.cutoff(now)

        candidates = await self.repository.find_within_radius(
            query.point, query.radius_meters, created_after=cutoff
        )
        # The store filters too; this keeps expired items out even if it does not
        live = [
            c
            for c in candidates
            if not self.retention_policy.is_expired(c.item.created_at, now)
        ]

        ranked = sort_candidates(live, query.sort)
        total_matches = len(ranked)
        result = NearbyNewsResult(
            items=paginate(ranked, query.page, query.limit),
            total_matches=total_matches,
            page=query.page,
            limit=query.limit,
            total_pages=count_pages(total_matches, query.limit),
        )

        self.logger.info(
            f"Nearby query ({query.point.latitude}, {query.point.longitude}) "
            f"r={query.radius_meters}m sort={query.sort.value}: "
            f"{len(result.items)} of {total_matches} on page {query.page}"
        )
        return result

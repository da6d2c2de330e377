# repositories/mongo_news_repository.py

"""
MongoDB implementation of the news repository using Motor.
"""

from typing import List, Optional
from datetime import datetime

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorDatabase,
    AsyncIOMotorCollection,
)
from pymongo import ASCENDING, GEOSPHERE
from pymongo.errors import PyMongoError

from ..core.exceptions import StorageFailureError
from ..core.retention import DEFAULT_TTL
from ..interfaces.news_repository_interface import NewsRepositoryInterface
from ..models.news_model import GeoJSONPoint, NewsModel
from ..schemas.news_schemas import GeoPoint, NewsItem, ProximityCandidate
from ..utils.geo_utils import haversine_distance
from common.logger import LoggerFactory, LoggerType, LogLevel

# $geoNear measures on its own sphere; widen its cut so the haversine
# re-check below is the one deciding boundary cases
GEO_NEAR_SLACK_METERS = 1.0


class MongoNewsRepository(NewsRepositoryInterface):
    """MongoDB implementation of NewsRepositoryInterface"""

    def __init__(
        self,
        mongo_url: str,
        database_name: str = "nearby_news",
        collection_name: str = "news_items",
        ttl_seconds: int = int(DEFAULT_TTL.total_seconds()),
        server_selection_timeout_ms: int = 2000,
    ):
        """
        Initialize MongoDB news repository

        Args:
            mongo_url: MongoDB connection URL
            database_name: Database name
            collection_name: Collection holding news items
            ttl_seconds: expireAfterSeconds of the TTL index on created_at
            server_selection_timeout_ms: Fail fast when MongoDB is unreachable
        """
        self.mongo_url = mongo_url
        self.database_name = database_name
        self.ttl_seconds = ttl_seconds
        self.client: AsyncIOMotorClient = AsyncIOMotorClient(
            mongo_url,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.db: AsyncIOMotorDatabase = self.client[database_name]
        self.collection: AsyncIOMotorCollection = self.db[collection_name]

        self.logger = LoggerFactory.get_logger(
            name="mongo-news-repository",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/mongo_news_repository.log",
        )

        self.logger.info(
            f"MongoDB news repository initialized with database: {database_name}"
        )

    async def initialize(self) -> None:
        """Create the geospatial and TTL indexes"""
        try:
            indexes = [
                ([("location", GEOSPHERE)], {"name": "location_2dsphere"}),
                (
                    [("created_at", ASCENDING)],
                    {"name": "created_at_ttl", "expireAfterSeconds": self.ttl_seconds},
                ),
            ]

            for keys, kwargs in indexes:
                await self.collection.create_index(keys, **kwargs)

            self.logger.info("MongoDB news repository indexes created successfully")

        except PyMongoError as e:
            self.logger.error(
                f"Failed to initialize MongoDB news repository indexes: {e}"
            )
            raise StorageFailureError("Failed to initialize news indexes") from e

    async def save_news_item(self, news_item: NewsItem) -> NewsItem:
        try:
            doc = NewsModel.from_news_item(news_item).to_document()
            result = await self.collection.insert_one(doc)

            item_id = str(result.inserted_id)
            self.logger.debug(f"Saved news item: {news_item.content[:50]} (ID: {item_id})")
            return news_item.model_copy(update={"id": item_id})

        except PyMongoError as e:
            self.logger.error(f"Failed to save news item: {e}")
            raise StorageFailureError("Failed to save news item") from e

    async def find_within_radius(
        self,
        point: GeoPoint,
        radius_meters: float,
        created_after: Optional[datetime] = None,
    ) -> List[ProximityCandidate]:
        pipeline = self._build_geo_near_pipeline(point, radius_meters, created_after)

        try:
            docs = await self.collection.aggregate(pipeline).to_list(length=None)
        except PyMongoError as e:
            self.logger.error(f"Failed to run proximity query: {e}")
            raise StorageFailureError("Failed to query nearby news") from e

        candidates = []
        for doc in docs:
            doc.pop("distance_meters", None)
            item = NewsModel(**doc).to_news_item()
            distance = haversine_distance(
                point.latitude,
                point.longitude,
                item.location.latitude,
                item.location.longitude,
            )
            if distance <= radius_meters:
                candidates.append(
                    ProximityCandidate(item=item, distance_meters=distance)
                )

        self.logger.debug(f"Found {len(candidates)} news items within {radius_meters}m")
        return candidates

    async def delete_expired(self, cutoff: datetime) -> int:
        try:
            result = await self.collection.delete_many({"created_at": {"$lte": cutoff}})
        except PyMongoError as e:
            self.logger.error(f"Failed to delete expired news items: {e}")
            raise StorageFailureError("Failed to delete expired news") from e
        return result.deleted_count

    async def count_news(self, created_after: Optional[datetime] = None) -> int:
        query_filter = {}
        if created_after is not None:
            query_filter["created_at"] = {"$gt": created_after}
        try:
            return await self.collection.count_documents(query_filter)
        except PyMongoError as e:
            self.logger.error(f"Failed to count news items: {e}")
            raise StorageFailureError("Failed to count news") from e

    async def health_check(self) -> bool:
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            self.logger.warning(f"MongoDB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the MongoDB connection."""
        self.client.close()
        self.logger.info("Database connection closed")

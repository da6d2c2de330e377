# repositories/mongo_location_repository.py

"""
MongoDB implementation of the location ping repository.
"""

from datetime import datetime

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, GEOSPHERE, ReturnDocument
from pymongo.errors import PyMongoError

from ..core.exceptions import StorageFailureError
from ..core.retention import DEFAULT_TTL
from ..interfaces.location_repository_interface import LocationRepositoryInterface
from ..models.news_model import LocationPingModel
from ..schemas.location_schemas import LocationPing
from common.logger import LoggerFactory, LoggerType, LogLevel


class MongoLocationRepository(LocationRepositoryInterface):
    """Location pings stored in MongoDB, one document per device when keyed"""

    def __init__(
        self,
        mongo_url: str,
        database_name: str = "nearby_news",
        collection_name: str = "location_pings",
        ttl_seconds: int = int(DEFAULT_TTL.total_seconds()),
        server_selection_timeout_ms: int = 2000,
    ):
        self.ttl_seconds = ttl_seconds
        self.client: AsyncIOMotorClient = AsyncIOMotorClient(
            mongo_url,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.collection: AsyncIOMotorCollection = self.client[database_name][
            collection_name
        ]
        self.logger = LoggerFactory.get_logger(
            name="mongo-location-repository",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/mongo_location_repository.log",
        )

    async def initialize(self) -> None:
        try:
            indexes = [
                ([("location", GEOSPHERE)], {"name": "location_2dsphere"}),
                (
                    [("updated_at", ASCENDING)],
                    {"name": "updated_at_ttl", "expireAfterSeconds": self.ttl_seconds},
                ),
                (
                    [("device_id", ASCENDING)],
                    {
                        "name": "device_id_unique",
                        "unique": True,
                        "partialFilterExpression": {"device_id": {"$type": "string"}},
                    },
                ),
            ]
            for keys, kwargs in indexes:
                await self.collection.create_index(keys, **kwargs)

            self.logger.info("MongoDB location repository indexes created successfully")

        except PyMongoError as e:
            self.logger.error(f"Failed to initialize location indexes: {e}")
            raise StorageFailureError("Failed to initialize location indexes") from e

    async def save_ping(self, ping: LocationPing) -> LocationPing:
        doc = LocationPingModel.from_ping(ping).to_document()
        try:
            if ping.device_id:
                stored = await self.collection.find_one_and_replace(
                    {"device_id": ping.device_id},
                    doc,
                    upsert=True,
                    return_document=ReturnDocument.AFTER,
                )
                ping_id = str(stored["_id"])
            else:
                result = await self.collection.insert_one(doc)
                ping_id = str(result.inserted_id)
        except PyMongoError as e:
            self.logger.error(f"Failed to save location ping: {e}")
            raise StorageFailureError("Failed to save location") from e

        return ping.model_copy(update={"id": ping_id})

    async def delete_expired(self, cutoff: datetime) -> int:
        try:
            result = await self.collection.delete_many({"updated_at": {"$lte": cutoff}})
        except PyMongoError as e:
            self.logger.error(f"Failed to delete expired pings: {e}")
            raise StorageFailureError("Failed to delete expired pings") from e
        return result.deleted_count

    async def count_pings(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            self.logger.error(f"Failed to count pings: {e}")
            raise StorageFailureError("Failed to count pings") from e

    async def close(self) -> None:
        self.client.close()

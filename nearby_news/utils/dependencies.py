# utils/dependencies.py

"""
Dependency injection utilities for the nearby news service using dependency_injector.
"""

from dependency_injector import containers, providers

from ..adapters.local_image_store import LocalImageStore
from ..core.config import Settings, settings
from ..core.retention import RetentionPolicy
from ..repositories.memory_location_repository import InMemoryLocationRepository
from ..repositories.memory_news_repository import InMemoryNewsRepository
from ..repositories.mongo_location_repository import MongoLocationRepository
from ..repositories.mongo_news_repository import MongoNewsRepository
from ..services.location_service import LocationService
from ..services.news_service import NewsService
from ..services.proximity_query_service import ProximityQueryService
from ..services.retention_service import RetentionScheduler, RetentionService
from common.logger import LoggerFactory, LoggerType, LogLevel

# Create logger for dependencies
logger = LoggerFactory.get_logger(
    name="dependencies", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the nearby news service."""

    # Configuration
    config = providers.Configuration()

    # Retention policy
    retention_policy = providers.Singleton(
        RetentionPolicy.from_days,
        days=config.news_ttl_days.as_int(),
    )

    # News Repository
    news_repository = providers.Selector(
        config.storage_backend,
        mongo=providers.Singleton(
            MongoNewsRepository,
            mongo_url=config.mongodb_url.as_(str),
            database_name=config.mongodb_database.as_(str),
            collection_name=config.mongodb_collection_news.as_(str),
            ttl_seconds=retention_policy.provided.ttl_seconds,
            server_selection_timeout_ms=config.mongodb_server_selection_timeout.as_int(),
        ),
        memory=providers.Singleton(InMemoryNewsRepository),
    )

    # Location Repository
    location_repository = providers.Selector(
        config.storage_backend,
        mongo=providers.Singleton(
            MongoLocationRepository,
            mongo_url=config.mongodb_url.as_(str),
            database_name=config.mongodb_database.as_(str),
            collection_name=config.mongodb_collection_locations.as_(str),
            ttl_seconds=retention_policy.provided.ttl_seconds,
            server_selection_timeout_ms=config.mongodb_server_selection_timeout.as_int(),
        ),
        memory=providers.Singleton(InMemoryLocationRepository),
    )

    # Image Store
    image_store = providers.Singleton(
        LocalImageStore,
        upload_dir=config.upload_dir.as_(str),
        max_bytes=config.max_image_bytes.as_int(),
        base_url=config.image_base_url,
    )

    # News Service
    news_service = providers.Singleton(
        NewsService,
        repository=news_repository,
        image_store=image_store,
        max_content_length=config.max_content_length.as_int(),
    )

    # Proximity Query Service
    proximity_query_service = providers.Singleton(
        ProximityQueryService,
        repository=news_repository,
        retention_policy=retention_policy,
        max_radius_meters=config.max_radius_meters.as_float(),
        default_limit=config.default_page_limit.as_int(),
        max_limit=config.max_page_limit.as_int(),
    )

    # Location Service
    location_service = providers.Singleton(
        LocationService,
        repository=location_repository,
    )

    # Retention
    retention_service = providers.Singleton(
        RetentionService,
        news_repository=news_repository,
        location_repository=location_repository,
        retention_policy=retention_policy,
    )

    retention_scheduler = providers.Singleton(
        RetentionScheduler,
        retention_service=retention_service,
        interval_seconds=config.retention_sweep_interval_seconds.as_int(),
    )


# Global container instance
container = Container()


def configure_container(app_settings: Settings) -> None:
    """Load settings into the container and drop previously built singletons"""
    container.config.from_dict(app_settings.model_dump())
    container.reset_singletons()


configure_container(settings)


async def initialize_services() -> None:
    """Create store indexes. Raises StorageFailureError when the store is down."""
    logger.info("Initializing nearby news services...")

    await container.news_repository().initialize()
    await container.location_repository().initialize()

    logger.info("✅ Repositories initialized successfully")


async def cleanup_services() -> None:
    """Stop background jobs and close store connections."""
    logger.info("Cleaning up nearby news services...")

    container.retention_scheduler().stop()
    await container.news_repository().close()
    await container.location_repository().close()

    logger.info("✅ All nearby news services cleaned up successfully")


# Dependency provider functions
def get_news_repository():
    """Get news repository instance."""
    return container.news_repository()


def get_news_service() -> NewsService:
    """Get news service instance."""
    return container.news_service()


def get_proximity_query_service() -> ProximityQueryService:
    """Get proximity query service instance."""
    return container.proximity_query_service()


def get_location_service() -> LocationService:
    """Get location service instance."""
    return container.location_service()


def get_retention_scheduler() -> RetentionScheduler:
    """Get retention scheduler instance."""
    return container.retention_scheduler()

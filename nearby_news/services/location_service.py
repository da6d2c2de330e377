# services/location_service.py

from typing import Any, Callable, Mapping
from datetime import datetime

from ..core.exceptions import ValidationError
from ..core.retention import utc_now
from ..interfaces.location_repository_interface import LocationRepositoryInterface
from ..schemas.location_schemas import LocationPing
from ..utils.validation import validate_location_update
from common.logger import LoggerFactory, LoggerType, LogLevel


class LocationService:
    """Records the latest position reported by clients"""

    def __init__(
        self,
        repository: LocationRepositoryInterface,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.clock = clock
        self.logger = LoggerFactory.get_logger(
            name="location-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
        )

    async def update_location(self, fields: Mapping[str, Any]) -> LocationPing:
        """
        Validate and store a location ping

        Repeating the same update for a device leaves exactly one ping for it.

        Raises:
            ValidationError: Invalid coordinates
            StorageFailureError: The store failed
        """
        try:
            request = validate_location_update(fields)
        except ValidationError as e:
            self.logger.warning(f"Rejected location update: {e.code}: {e.message}")
            raise

        ping = LocationPing(
            device_id=request.device_id,
            location=request.location,
            updated_at=self.clock(),
        )
        stored = await self.repository.save_ping(ping)
        self.logger.debug(f"Stored location ping {stored.id}")
        return stored

# core/exceptions.py

"""
Error taxonomy of the nearby news service.

Client-input errors derive from ValidationError and carry a stable ``code``
returned to callers. StorageFailureError marks infrastructure failures whose
details are logged but never sent to clients.
"""

from typing import Any, Dict, Optional


class NearbyNewsError(Exception):
    """Base exception for nearby news operations."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(NearbyNewsError):
    """A request field is missing, malformed or out of range."""

    code = "ValidationError"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.field = field


class MissingParameterError(ValidationError):
    code = "MissingParameter"


class InvalidTypeError(ValidationError):
    code = "InvalidType"


class LatitudeOutOfRangeError(ValidationError):
    code = "LatitudeOutOfRange"


class LongitudeOutOfRangeError(ValidationError):
    code = "LongitudeOutOfRange"


class RadiusOutOfRangeError(ValidationError):
    code = "RadiusOutOfRange"


class PaginationOutOfRangeError(ValidationError):
    code = "PaginationOutOfRange"


class ContentEmptyError(ValidationError):
    code = "ContentEmpty"


class ContentTooLongError(ValidationError):
    code = "ContentTooLong"


class InvalidImageError(ValidationError):
    code = "InvalidImage"


class StorageFailureError(NearbyNewsError):
    """The persistence or index layer is unreachable or failed internally."""

    code = "StorageFailure"

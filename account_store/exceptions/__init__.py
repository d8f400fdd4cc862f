# Base exception class
from .base import AccountStoreError

from .domain_exceptions import (
    ConflictError,
    ConnectionError,
    DataIntegrityError,
    NotFoundError,
    RetryableError,
    SerializationError,
    ValidationError,
)

__all__ = [
    # Base exception
    "AccountStoreError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "DataIntegrityError",
    "NotFoundError",
    "RetryableError",
    "SerializationError",
    "ValidationError",
]

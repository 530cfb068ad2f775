# Base exception class
from .base import DynamoDBUtilError

from .domain_exceptions import (
    ConfigurationError,
    ConnectionError,
    DecodeError,
    NotInitializedError,
    ValidationError,
)

__all__ = [
    # Base exception
    "DynamoDBUtilError",

    # Domain exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConnectionError",
    "DecodeError",
    "NotInitializedError",
    "ValidationError",
]

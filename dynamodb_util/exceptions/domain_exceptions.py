"""
Domain-Specific Exceptions for dynamodb-util

Every error raised by the library itself extends DynamoDBUtilError.
Failures reported by DynamoDB (botocore ClientError and friends) are NOT
wrapped; they reach the caller exactly as boto3 raised them.

Organized by category:
1. Configuration and Lifecycle Errors
2. Data Validation and Decoding Errors
3. Infrastructure Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBUtilError


# =============================================================================
# Configuration and Lifecycle Errors
# =============================================================================

class ConfigurationError(DynamoDBUtilError):
    """Raised when the library cannot be configured from the given settings.

    Used for:
    - Neither an identity pool id nor a complete access key pair supplied
    - No target table name available (DYNAMODB_TABLE unset)
    """

    def __init__(self, message: str, missing: Optional[list] = None, original_error: Optional[Exception] = None):
        """Initialize configuration error.

        Args:
            message: Human-readable error message
            missing: Names of the settings that were missing
            original_error: The original exception that caused this error
        """
        self.missing = missing or []
        context = {}
        if self.missing:
            context['missing'] = ", ".join(self.missing)
        super().__init__(message, original_error, context)


class NotInitializedError(DynamoDBUtilError):
    """Raised when an operation runs before the client context was initialized."""

    def __init__(self, operation: Optional[str] = None):
        """Initialize not-initialized error.

        Args:
            operation: Name of the operation that was attempted
        """
        self.operation = operation
        message = "DynamoDB client is not initialized; call init() before issuing operations"
        context = {}
        if operation:
            context['operation'] = operation
        super().__init__(message, None, context)


# =============================================================================
# Data Validation and Decoding Errors
# =============================================================================

class ValidationError(DynamoDBUtilError):
    """Raised when caller-supplied data cannot be turned into an item.

    Used for:
    - Missing primary key value
    - Values that cannot be serialized to JSON
    - Stored payloads that do not match a requested Pydantic model
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


class DecodeError(DynamoDBUtilError):
    """Raised when a stored JSON payload cannot be deserialized."""

    def __init__(self, message: str, key: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize decode error.

        Args:
            message: Human-readable error message
            key: Key attributes of the item whose payload failed to decode
            original_error: The original exception that caused this error
        """
        self.key = key or {}
        context = {}
        if self.key:
            context['key'] = self.key
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure Errors
# =============================================================================

class ConnectionError(DynamoDBUtilError):
    """Raised when the boto3 session or DynamoDB resource cannot be created.

    Used for:
    - Invalid region or endpoint configuration
    - botocore failing to build the service resource
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize connection error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (e.g., endpoint, region)
        """
        super().__init__(message, original_error, context)

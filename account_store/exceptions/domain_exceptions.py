"""
Account Store Exceptions

Every failure reaching a caller is one of these types, so a host application
can decide whether to retry, log or abort instead of the process dying on the
first rejected request.

Organized by category:
1. Data Validation and Serialization Errors
2. Resource Not Found Errors
3. Conflict and Integrity Errors
4. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import AccountStoreError


# =============================================================================
# Data Validation and Serialization Errors
# =============================================================================

class ValidationError(AccountStoreError):
    """Raised when DynamoDB rejects a request as invalid.

    Used for:
    - ValidationException from DynamoDB (e.g. a malformed key)
    - Account payloads that cannot be encoded or decoded (SerializationError)
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class SerializationError(ValidationError):
    """Raised when an account payload cannot be encoded to or decoded from a DynamoDB item."""

    def __init__(self, message: str, model_name: Optional[str] = None, original_error: Optional[Exception] = None):
        self.model_name = model_name
        super().__init__(message, original_error, {'model': model_name} if model_name else None)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class NotFoundError(AccountStoreError):
    """Raised when a DynamoDB resource (usually the table) does not exist."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict and Integrity Errors
# =============================================================================

class ConflictError(AccountStoreError):
    """Raised when a resource already exists or is being modified.

    Used for:
    - CreateTable on a table that already exists
    - ResourceInUseException while a table is being created or deleted
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


class DataIntegrityError(AccountStoreError):
    """Raised when stored data contradicts the table schema.

    A lookup by partition key can match at most one row; seeing more than one
    means the table is not the one this library created.
    """

    def __init__(self, message: str, table_name: str, key: Dict[str, Any], count: int):
        self.table_name = table_name
        self.key = key
        self.count = count
        context = {
            'table_name': table_name,
            'key': key,
            'count': count
        }
        super().__init__(message, None, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(AccountStoreError):
    """Raised when talking to DynamoDB fails.

    Used for:
    - Session creation failures (e.g. unknown credentials profile)
    - Unreachable endpoints and transport timeouts
    - Authentication/authorization failures
    - Use of a connection after it was closed
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(AccountStoreError):
    """Raised when an operation failed for a temporary reason and may succeed if repeated.

    Used for:
    - ProvisionedThroughputExceededException and other throttling
    - Temporary service unavailability
    - Control-plane limits (LimitExceededException)

    ``error_code`` tells throttling apart from unavailability.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)

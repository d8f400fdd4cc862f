"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around boto3 Table operations.
The read/write APIs build their requests themselves; the gateway only:

- Resolves the boto3 Table handle from an open connection
- Maps botocore errors to account store exceptions
- Logs writes

Every operation is a single request/response exchange. Nothing is retried
here; a RetryableError tells the caller that retrying makes sense.
"""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from .connection import DynamoDBConnection

logger = logging.getLogger(__name__)

_THROTTLING_CODES = {
    'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
    'ThrottlingException', 'TooManyRequestsException'
}

_UNAVAILABLE_CODES = {
    'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
    'InternalFailure', 'RequestTimeoutException'
}

_AUTH_CODES = {
    'UnrecognizedClientException', 'AccessDeniedException', 'ExpiredTokenException',
    'InvalidSignatureException', 'IncompleteSignatureException', 'MissingAuthenticationTokenException'
}


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to account store exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "Query", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context (the account name)

    Returns:
        Appropriate account store exception, to be raised by the caller
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error'].get('Message', '')

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ResourceNotFoundException':
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code in ('ResourceInUseException', 'TableAlreadyExistsException'):
        return ConflictError(f"Resource in use or already exists - {full_message}", resource_id or table_name, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code in _THROTTLING_CODES:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in _UNAVAILABLE_CODES:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code == 'LimitExceededException':
        return RetryableError(f"Too many concurrent table operations - {full_message}", original_error=error)

    elif error_code in _AUTH_CODES:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def map_transport_error(error: BotoCoreError, operation: str, table_name: str) -> ConnectionError:
    """Map botocore transport errors (unreachable endpoint, timeouts, waiter failures)."""
    return ConnectionError(
        f"{operation} on {table_name} failed before DynamoDB answered: {error}",
        original_error=error,
        context={'operation': operation, 'table_name': table_name}
    )


class TableGateway:
    """
    Thin gateway for one DynamoDB table.

    Designed to be used by the read/write APIs rather than directly by clients.
    """

    def __init__(self, connection: DynamoDBConnection, table_name: str, partition_key: Optional[str] = None):
        """Initialize table gateway.

        Args:
            connection: Open DynamoDB connection
            table_name: Name of the DynamoDB table
            partition_key: Attribute used to label errors with the failing item's key
        """
        self.connection = connection
        self.table_name = table_name
        self.partition_key = partition_key
        self._table = None

    @property
    def table(self):
        """boto3 DynamoDB Table resource. Raises ConnectionError once the connection is closed."""
        if self.connection.closed:
            raise ConnectionError(f"Cannot access table '{self.table_name}': connection is closed")
        if self._table is None:
            self._table = self.connection.table(self.table_name)
        return self._table

    def _resource_id(self, item: Dict[str, Any]) -> Optional[str]:
        if self.partition_key:
            return item.get(self.partition_key)
        return None

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Execute DynamoDB Query operation.

        Args:
            **kwargs: All boto3 query parameters

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.query(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name) from e
        except BotoCoreError as e:
            raise map_transport_error(e, "Query", self.table_name) from e

    def scan(self, **kwargs) -> Dict[str, Any]:
        """
        Execute DynamoDB Scan operation.

        Scans read the whole table; callers should always pass ``Limit``.

        Args:
            **kwargs: All boto3 scan parameters

        Returns:
            Raw DynamoDB response
        """
        if 'Limit' not in kwargs:
            logger.warning(f"Scan on {self.table_name} without Limit - consider adding one")
        try:
            return self.table.scan(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        except BotoCoreError as e:
            raise map_transport_error(e, "Scan", self.table_name) from e

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Put item into DynamoDB table, replacing any item with the same key.

        Args:
            item: Item to store
        """
        resource_id = self._resource_id(item)
        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, resource_id) from e
        except BotoCoreError as e:
            raise map_transport_error(e, "PutItem", self.table_name) from e
        logger.info(f"Put item in {self.table_name}: {self.partition_key}={resource_id}")

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete item from DynamoDB table. Missing items are not an error.

        Args:
            key: Primary key of item to delete
        """
        try:
            self.table.delete_item(Key=key)
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, self._resource_id(key)) from e
        except BotoCoreError as e:
            raise map_transport_error(e, "DeleteItem", self.table_name) from e
        logger.info(f"Deleted item from {self.table_name}: {key}")


def create_table_gateway(connection: DynamoDBConnection, meta) -> TableGateway:
    """
    Factory function to create a TableGateway for a table described by ``meta``.

    Args:
        connection: Open DynamoDB connection
        meta: TableMeta subclass (uses config.get_table_name() for the prefix)

    Returns:
        Configured TableGateway instance
    """
    full_table_name = connection.config.get_table_name(meta.table_name)
    return TableGateway(connection, full_table_name, meta.partition_key)

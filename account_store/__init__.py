"""
DynamoDB Account Store

A small data-access library for named accounts stored in a DynamoDB table,
built on boto3 and Pydantic. Read and write APIs are kept separate (CQRS),
every DynamoDB failure is raised as a typed exception, and the connection is
opened and closed explicitly.
"""

from .config import DynamoDBConfig
from .exceptions import (
    AccountStoreError,
    ConflictError,
    ConnectionError,
    DataIntegrityError,
    NotFoundError,
    RetryableError,
    SerializationError,
    ValidationError,
)
from .models import (
    Account,
    AccountsTable,
    TableMeta,
)
from .core import (
    DynamoDBConnection,
    TableAdmin,
    TableGateway,
    create_table_gateway,
    open_connection,
    table_exists,
)
from .handlers import (
    AccountReadApi,
    AccountWriteApi,
)
from .client import (
    AccountStoreClient,
    create_table,
    delete_account,
    ensure_table,
    find_account,
    list_accounts,
    list_tables,
    put_account,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "AccountStoreError",
    "ConflictError",
    "ConnectionError",
    "DataIntegrityError",
    "NotFoundError",
    "RetryableError",
    "SerializationError",
    "ValidationError",

    # Models
    "Account",
    "AccountsTable",
    "TableMeta",

    # Connection and table infrastructure
    "DynamoDBConnection",
    "TableAdmin",
    "TableGateway",
    "create_table_gateway",
    "open_connection",
    "table_exists",

    # CQRS APIs
    "AccountReadApi",
    "AccountWriteApi",

    # Client
    "AccountStoreClient",
    "create_table",
    "delete_account",
    "ensure_table",
    "find_account",
    "list_accounts",
    "list_tables",
    "put_account",
]

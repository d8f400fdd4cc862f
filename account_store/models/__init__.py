# Base mixins and table metadata
from .base import (
    DynamoDBMixin,
    TableMeta,
)

# Domain models
from .account import (
    Account,
    AccountsTable,
)

__all__ = [
    "DynamoDBMixin",
    "TableMeta",
    "Account",
    "AccountsTable",
]

"""
Account CQRS APIs

Read API (queries.py):
- Strongly-consistent Query by account name
- Single capped Scan page for listing

Write API (commands.py):
- Unconditional PutItem (upsert)
- DeleteItem by account name

Usage:
    read_api = AccountReadApi(connection)
    write_api = AccountWriteApi(connection)
"""

from .queries import AccountReadApi
from .commands import AccountWriteApi

__all__ = [
    "AccountReadApi",
    "AccountWriteApi",
]

"""
Handler Layer

Read and write APIs per domain, following CQRS:
queries.py holds reads, commands.py holds writes.

handlers/ (this layer) -> core/ (connection, gateway) -> DynamoDB
handlers/ (this layer) <- models/ (domain models)
"""

from .accounts.queries import AccountReadApi
from .accounts.commands import AccountWriteApi

__all__ = [
    'AccountReadApi',
    'AccountWriteApi',
]

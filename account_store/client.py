"""
Account Store Client

Facade over the account read/write APIs and table administration for a single
open connection. Every method is one blocking request/response exchange and
raises an ``AccountStoreError`` subclass on failure.

    with open_connection(is_local=True) as connection:
        client = AccountStoreClient(connection)
        client.ensure_table()
        client.put_account(Account(name="Foo", key="123456", description="My first account"))
        client.find_account("Foo")

The module-level functions take the connection explicitly for callers that
do not want to hold a client object.
"""

from typing import Iterable, List, Optional

from .core import DynamoDBConnection, TableAdmin, table_exists
from .core.table_admin import DEFAULT_LIST_LIMIT
from .handlers import AccountReadApi, AccountWriteApi
from .handlers.accounts.queries import DEFAULT_SCAN_LIMIT
from .models import Account, AccountsTable


class AccountStoreClient:
    """Account operations bound to one open DynamoDB connection."""

    def __init__(self, connection: DynamoDBConnection):
        self.connection = connection
        self.admin = TableAdmin(connection)
        self.read_api = AccountReadApi(connection)
        self.write_api = AccountWriteApi(connection)

    @property
    def table_name(self) -> str:
        return self.admin.full_table_name(AccountsTable)

    # Table administration

    def list_tables(self, limit: int = DEFAULT_LIST_LIMIT) -> List[str]:
        return self.admin.list_tables(limit)

    @staticmethod
    def table_exists(names: Iterable[str], target: str) -> bool:
        return table_exists(names, target)

    def create_table(self, wait: bool = False) -> dict:
        return self.admin.create_table(AccountsTable, wait=wait)

    def ensure_table(self) -> bool:
        return self.admin.ensure_table(AccountsTable)

    # Accounts

    def put_account(self, account: Account) -> Account:
        return self.write_api.put_account(account)

    def find_account(self, name: str) -> Optional[Account]:
        return self.read_api.find_account(name)

    def list_accounts(self, limit: int = DEFAULT_SCAN_LIMIT) -> List[Account]:
        return self.read_api.list_accounts(limit)

    def delete_account(self, name: str) -> None:
        self.write_api.delete_account(name)


def list_tables(connection: DynamoDBConnection, limit: int = DEFAULT_LIST_LIMIT) -> List[str]:
    return TableAdmin(connection).list_tables(limit)


def create_table(connection: DynamoDBConnection, wait: bool = False) -> dict:
    return TableAdmin(connection).create_table(AccountsTable, wait=wait)


def ensure_table(connection: DynamoDBConnection) -> bool:
    return TableAdmin(connection).ensure_table(AccountsTable)


def put_account(connection: DynamoDBConnection, account: Account) -> Account:
    return AccountWriteApi(connection).put_account(account)


def find_account(connection: DynamoDBConnection, name: str) -> Optional[Account]:
    return AccountReadApi(connection).find_account(name)


def list_accounts(connection: DynamoDBConnection, limit: int = DEFAULT_SCAN_LIMIT) -> List[Account]:
    return AccountReadApi(connection).list_accounts(limit)


def delete_account(connection: DynamoDBConnection, name: str) -> None:
    AccountWriteApi(connection).delete_account(name)

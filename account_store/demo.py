#!/usr/bin/env python3
"""
Account store demonstration.

Runs a fixed script against DynamoDB Local or the real service:

1. List tables
2. Create the Accounts table (local mode only, when missing)
3. Store account "Foo" and read it back
4. Store account "Fum" and list all accounts
5. Delete "Foo" and list again

Usage:
    python -m account_store local   # DynamoDB Local on 127.0.0.1:8000
    python -m account_store         # eu-central-1 with the "home-cloud" profile

Against the real service the table is expected to exist already; the program
does not manage schema there.
"""

import logging
import sys
from typing import List, Optional

from .client import AccountStoreClient
from .config import DynamoDBConfig
from .core import open_connection
from .exceptions import AccountStoreError
from .models import Account

logger = logging.getLogger(__name__)


def is_local_mode(argv: List[str]) -> bool:
    """Local mode is selected by a first argument equal to ``local``."""
    return len(argv) > 0 and argv[0] == "local"


def run_demo(client: AccountStoreClient, create_schema: bool) -> List[Account]:
    """Run the demonstration script and return the final account listing."""
    print("1. Listing tables...")
    names = client.list_tables()
    print(f"   Tables: {names}")

    if create_schema and not client.table_exists(names, client.table_name):
        print(f"2. Creating table {client.table_name}...")
        client.create_table(wait=True)

    print("3. Storing account Foo...")
    client.put_account(Account(name="Foo", key="123456", description="My first account"))
    found = client.find_account("Foo")
    print(f"   Find Account: {found}")

    print("4. Storing account Fum...")
    client.put_account(Account(name="Fum", key="654321", description="My second account"))
    for account in client.list_accounts():
        print(f"   {account}")

    print("5. Deleting account Foo...")
    client.delete_account("Foo")
    remaining = client.list_accounts()
    for account in remaining:
        print(f"   {account}")

    return remaining


def main(argv: Optional[List[str]] = None, config: Optional[DynamoDBConfig] = None) -> int:
    """Entry point. Returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    is_local = is_local_mode(argv)

    if config is None:
        config = DynamoDBConfig.for_local_development() if is_local else DynamoDBConfig.for_remote()

    logging.basicConfig(
        level=logging.DEBUG if config.enable_debug_logging else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    # botocore debug output drowns the demo's own messages
    logging.getLogger("botocore").setLevel(logging.INFO)

    try:
        with open_connection(is_local, config) as connection:
            run_demo(AccountStoreClient(connection), create_schema=is_local)
    except AccountStoreError as e:
        logger.error(f"Account store demo failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

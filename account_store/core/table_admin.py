"""
Table administration: listing, existence checks and creation.

These go through the low-level client because the Table resource only knows
about a table that already exists.
"""

import logging
from typing import Any, Dict, Iterable, List, Type

from botocore.exceptions import BotoCoreError, ClientError

from ..models import TableMeta
from .connection import DynamoDBConnection
from .table_gateway import map_dynamodb_error, map_transport_error

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 10


def table_exists(names: Iterable[str], target: str) -> bool:
    """Exact, case-sensitive membership check of ``target`` in ``names``."""
    return any(name == target for name in names)


class TableAdmin:
    """Control-plane operations for the tables described by ``TableMeta`` classes."""

    def __init__(self, connection: DynamoDBConnection):
        self.connection = connection

    def full_table_name(self, meta: Type[TableMeta]) -> str:
        return self.connection.config.get_table_name(meta.table_name)

    def list_tables(self, limit: int = DEFAULT_LIST_LIMIT) -> List[str]:
        """
        List table names known to the backend.

        DynamoDB Operation: ListTables (first page only)

        Args:
            limit: Maximum number of names to return

        Returns:
            Up to ``limit`` table names
        """
        try:
            response = self.connection.client.list_tables(Limit=limit)
        except ClientError as e:
            raise map_dynamodb_error(e, "ListTables", "*") from e
        except BotoCoreError as e:
            raise map_transport_error(e, "ListTables", "*") from e

        names = response.get('TableNames', [])
        logger.debug(f"ListTables returned {names}")
        return names

    def create_table(self, meta: Type[TableMeta], wait: bool = False) -> Dict[str, Any]:
        """
        Create the table described by ``meta``.

        DynamoDB Operation: CreateTable with provisioned throughput

        Args:
            meta: Table metadata (name, key schema, capacity)
            wait: Block until the table is ACTIVE

        Returns:
            The TableDescription from the CreateTable response

        Raises:
            ConflictError: The table already exists
        """
        table_name = self.full_table_name(meta)
        try:
            response = self.connection.client.create_table(
                TableName=table_name,
                AttributeDefinitions=meta.attribute_definitions(),
                KeySchema=meta.key_schema(),
                ProvisionedThroughput=meta.provisioned_throughput()
            )
            if wait:
                self.connection.client.get_waiter('table_exists').wait(TableName=table_name)
        except ClientError as e:
            raise map_dynamodb_error(e, "CreateTable", table_name) from e
        except BotoCoreError as e:
            raise map_transport_error(e, "CreateTable", table_name) from e

        logger.info(f"Created table {table_name}")
        logger.debug(f"CreateTable response: {response.get('TableDescription')}")
        return response.get('TableDescription', {})

    def ensure_table(self, meta: Type[TableMeta]) -> bool:
        """
        Create the table unless it is already listed.

        Only the first page of ListTables is checked, so a backend with many
        tables may report the table missing and CreateTable then raises
        ConflictError.

        Returns:
            True if the table was created, False if it already existed
        """
        table_name = self.full_table_name(meta)
        if table_exists(self.list_tables(), table_name):
            logger.info(f"Table {table_name} already exists")
            return False
        self.create_table(meta, wait=True)
        return True

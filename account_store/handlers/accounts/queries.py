"""
Account Read API

Both reads are strongly consistent, so a read issued after an acknowledged
write always sees that write.
"""

import logging
from typing import List, Optional

from boto3.dynamodb.conditions import Key

from ...core import DynamoDBConnection, create_table_gateway
from ...exceptions import DataIntegrityError
from ...models import Account, AccountsTable

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LIMIT = 100


class AccountReadApi:
    """
    Read-only API for account lookups.

    Uses these DynamoDB access patterns:
    - Query on the partition key for single-account lookups
    - A single, capped Scan page for listing
    """

    def __init__(self, connection: DynamoDBConnection):
        """Initialize read API with an open connection."""
        self.connection = connection
        self.gateway = create_table_gateway(connection, AccountsTable)

    def find_account(self, name: str) -> Optional[Account]:
        """
        Find an account by exact name.

        DynamoDB Operation: Query with KeyConditionExpression on AccountName,
        ConsistentRead, Limit=1

        Args:
            name: Account name (partition key value)

        Returns:
            Account if exactly one row matches, None if none does

        Raises:
            DataIntegrityError: More than one row came back for the name
        """
        if not name:
            # account names are non-empty, and DynamoDB rejects an empty key value
            return None

        response = self.gateway.query(
            KeyConditionExpression=Key(AccountsTable.partition_key).eq(name),
            ConsistentRead=True,
            Limit=1
        )

        items = response.get('Items', [])
        count = response.get('Count', len(items))
        if count == 0:
            logger.debug(f"No account named {name!r} in {self.gateway.table_name}")
            return None
        if count > 1:
            raise DataIntegrityError(
                f"Expected at most one account named {name!r}, got {count}",
                self.gateway.table_name,
                AccountsTable.build_key(name),
                count
            )

        account = Account.from_dynamodb_item(items[0])
        logger.debug(f"Found account: {account}")
        return account

    def list_accounts(self, limit: int = DEFAULT_SCAN_LIMIT) -> List[Account]:
        """
        List stored accounts.

        DynamoDB Operation: Scan with ConsistentRead and Limit

        Only the first page is read. A table holding more than ``limit``
        accounts yields an incomplete list; order is unspecified.

        Args:
            limit: Maximum number of rows to read

        Returns:
            Decoded accounts
        """
        response = self.gateway.scan(ConsistentRead=True, Limit=limit)

        accounts = [Account.from_dynamodb_item(item) for item in response.get('Items', [])]
        if response.get('LastEvaluatedKey'):
            logger.debug(f"Scan on {self.gateway.table_name} stopped after {len(accounts)} accounts; more rows exist")
        return accounts

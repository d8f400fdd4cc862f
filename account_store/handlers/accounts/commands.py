"""
Account Write API

Writes are unconditional: a put replaces any account stored under the same
name and a delete of a missing name succeeds. The empty name is never stored,
so deleting it sends no request.
"""

from ...core import DynamoDBConnection, create_table_gateway
from ...models import Account, AccountsTable


class AccountWriteApi:
    """Write-only API for account mutations."""

    def __init__(self, connection: DynamoDBConnection):
        """Initialize write API with an open connection."""
        self.connection = connection
        self.gateway = create_table_gateway(connection, AccountsTable)

    def put_account(self, account: Account) -> Account:
        """
        Store an account, overwriting any existing account with the same name.

        DynamoDB Operation: PutItem without ConditionExpression (upsert)

        Args:
            account: Account to store

        Returns:
            The stored account

        Raises:
            SerializationError: The account cannot be encoded
        """
        item = account.to_dynamodb_item()
        self.gateway.put_item(item)
        return account

    def delete_account(self, name: str) -> None:
        """
        Delete an account by name.

        DynamoDB Operation: DeleteItem on the partition key

        Args:
            name: Account name
        """
        if not name:
            return
        self.gateway.delete_item(AccountsTable.build_key(name))

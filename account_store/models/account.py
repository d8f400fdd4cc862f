"""
Account domain model and the metadata of the table it is stored in.
"""

from typing import ClassVar, Type

from pydantic import BaseModel, ConfigDict, Field

from .base import DynamoDBMixin, TableMeta


class AccountsTable(TableMeta):
    """The ``Accounts`` table: hash key ``AccountName``, payload under ``Data.object``."""
    table_name = 'Accounts'
    partition_key = 'AccountName'
    key_field = 'name'


class Account(DynamoDBMixin, BaseModel):
    """
    A named account holding an opaque key.

    ``name`` identifies the account and is unique across the table; writing an
    account with an existing name replaces the stored one.
    """

    table_meta: ClassVar[Type[TableMeta]] = AccountsTable

    name: str = Field(..., min_length=1, description="Unique account name (partition key)")
    key: str = Field("", description="Opaque secret or token value")
    description: str = Field("", description="Free text description")

    model_config = ConfigDict(
        validate_assignment=True
    )

    def __str__(self) -> str:
        # key is a secret
        return f"Account(name={self.name!r}, description={self.description!r})"

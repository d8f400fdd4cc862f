"""
Base Model Components

## Storage layout

Rows are not stored as flat columns. Each row carries the partition key as a
top-level attribute and the whole model as one nested map underneath a fixed
payload attribute:

```
{
    "AccountName": "Foo",                      # partition key
    "Data": {                                  # payload attribute
        "object": {                            # payload field
            "name": "Foo",
            "key": "123456",
            "description": "My first account"
        }
    }
}
```

The key value is therefore stored twice: once as the partition key and once
inside the payload. Reads only ever decode the payload.

## Components

- TableMeta: table name, key schema and provisioning for one table
- DynamoDBMixin: encoding/decoding between models and stored rows
"""

import logging
from typing import Any, ClassVar, Dict, List, Type

from boto3.dynamodb.types import TypeSerializer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import SerializationError

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()


class TableMeta:
    """Base class for table metadata definitions."""
    table_name: str
    partition_key: str
    partition_key_type: str = 'S'
    # Model field whose value becomes the partition key
    key_field: str
    payload_attribute: str = 'Data'
    payload_field: str = 'object'
    read_capacity_units: int = 10
    write_capacity_units: int = 10

    @classmethod
    def key_schema(cls) -> List[Dict[str, str]]:
        return [{'AttributeName': cls.partition_key, 'KeyType': 'HASH'}]

    @classmethod
    def attribute_definitions(cls) -> List[Dict[str, str]]:
        return [{'AttributeName': cls.partition_key, 'AttributeType': cls.partition_key_type}]

    @classmethod
    def provisioned_throughput(cls) -> Dict[str, int]:
        return {
            'ReadCapacityUnits': cls.read_capacity_units,
            'WriteCapacityUnits': cls.write_capacity_units
        }

    @classmethod
    def build_key(cls, value: Any) -> Dict[str, Any]:
        """Build the primary key dict for GetItem/DeleteItem."""
        return {cls.partition_key: value}


class DynamoDBMixin(BaseModel):
    """
    Mixin providing DynamoDB row encoding and decoding.

    Subclasses declare ``table_meta`` to say which table they live in and which
    field is the partition key.
    """

    table_meta: ClassVar[Type[TableMeta]]

    def to_dynamodb_payload(self) -> Dict[str, Any]:
        """
        Dump the model into the payload map stored under the payload attribute.

        Raises:
            SerializationError: If a value has no DynamoDB attribute-value encoding
        """
        payload = self.model_dump()
        try:
            _serializer.serialize(payload)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to encode {type(self).__name__} for DynamoDB: {e}")
            raise SerializationError(
                f"Failed to encode {type(self).__name__} for DynamoDB: {e}",
                type(self).__name__,
                e
            ) from e
        return payload

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert model to the full DynamoDB row (partition key plus wrapped payload).

        Example:
            item = account.to_dynamodb_item()
            gateway.put_item(item)
        """
        meta = self.table_meta
        payload = self.to_dynamodb_payload()
        return {
            meta.partition_key: payload[meta.key_field],
            meta.payload_attribute: {meta.payload_field: payload}
        }

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from a stored DynamoDB row.

        Args:
            item: Row as returned by the boto3 Table resource

        Raises:
            SerializationError: If the row has no payload or the payload does not fit the model
        """
        meta = cls.table_meta
        try:
            payload = item[meta.payload_attribute][meta.payload_field]
            return cls.model_validate(payload)
        except (KeyError, TypeError, PydanticValidationError) as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            raise SerializationError(
                f"Failed to convert DynamoDB item to {cls.__name__}: {e}",
                cls.__name__,
                e
            ) from e

"""
Core infrastructure components for DynamoDB operations.

- DynamoDBConnection: explicitly opened and closed boto3 session/resource
- TableGateway: Thin wrapper over boto3 Table operations
- TableAdmin: table listing and creation
"""

from .connection import DynamoDBConnection, open_connection
from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error, map_transport_error
from .table_admin import TableAdmin, table_exists

__all__ = [
    "DynamoDBConnection",
    "open_connection",
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
    "map_transport_error",
    "TableAdmin",
    "table_exists",
]

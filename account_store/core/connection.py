"""
DynamoDB Connection

One explicitly scoped handle per process run: opened once at startup, passed
to every API that talks to DynamoDB, and closed on shutdown.

    with open_connection(is_local=True) as connection:
        client = AccountStoreClient(connection)
        ...

Opening creates the boto3 session and resource eagerly so that a bad
credentials profile or endpoint fails at startup rather than on the first
request. No network call is made until an operation runs.
"""

import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from ..config import DynamoDBConfig
from ..exceptions import ConnectionError

logger = logging.getLogger(__name__)


class DynamoDBConnection:
    """
    Owns the boto3 session and DynamoDB resource for one configuration.

    The low-level client (``connection.client``) is the resource's own client,
    so both share a single HTTP connection pool.
    """

    def __init__(self, config: DynamoDBConfig):
        """Initialize connection.

        Args:
            config: DynamoDB configuration
        """
        self.config = config
        self._dynamodb = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._closed:
            raise ConnectionError(
                "DynamoDB connection is closed",
                context={'endpoint': self.config.endpoint_url or self.config.region_name}
            )
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    profile_name=self.config.profile_name,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'total_max_attempts': self.config.max_attempts},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except (BotoCoreError, ValueError) as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(
                    f"Failed to connect to DynamoDB: {e}",
                    e,
                    {'profile': self.config.profile_name, 'endpoint': self.config.endpoint_url}
                ) from e
        return self._dynamodb

    @property
    def client(self):
        """Low-level boto3 DynamoDB client, used for table administration."""
        return self.dynamodb.meta.client

    def table(self, table_name: str):
        """Get a boto3 Table resource for ``table_name``."""
        return self.dynamodb.Table(table_name)

    def open(self) -> 'DynamoDBConnection':
        """Create the session and resource now instead of on first use. Repeat calls are no-ops."""
        if self._dynamodb is not None:
            return self
        _ = self.dynamodb
        logger.info(
            f"Opened DynamoDB connection (region={self.config.region_name}, "
            f"endpoint={self.config.endpoint_url or 'default'})"
        )
        return self

    def close(self) -> None:
        """Release the underlying HTTP connections. Safe to call more than once."""
        if self._closed:
            return
        if self._dynamodb is not None:
            self._dynamodb.meta.client.close()
            self._dynamodb = None
        self._closed = True
        logger.info("Closed DynamoDB connection")

    def __enter__(self) -> 'DynamoDBConnection':
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def open_connection(is_local: bool, config: Optional[DynamoDBConfig] = None) -> DynamoDBConnection:
    """
    Open a connection to DynamoDB Local or to the remote service.

    Args:
        is_local: Use the emulator at 127.0.0.1:8000 without real credentials.
            Otherwise use eu-central-1 with the ``home-cloud`` credentials profile.
        config: Explicit configuration; overrides the mode defaults when given

    Returns:
        Opened DynamoDBConnection

    Raises:
        ConnectionError: If the session cannot be established
    """
    if config is None:
        config = DynamoDBConfig.for_local_development() if is_local else DynamoDBConfig.for_remote()
    return DynamoDBConnection(config).open()

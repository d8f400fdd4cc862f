"""
Test configuration and fixtures for the account store.

Unit tests run against moto's in-memory DynamoDB; integration tests in
tests/integration/ need DynamoDB Local and skip when it is not reachable.
"""

import os

import pytest
import requests
from moto import mock_aws

from account_store import (
    Account,
    AccountStoreClient,
    AccountsTable,
    DynamoDBConfig,
    DynamoDBConnection,
    TableAdmin,
)

LOCAL_ENDPOINT = "http://127.0.0.1:8000"


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep tests away from real credentials and any developer .env settings."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-central-1")
    for name in ("AWS_REGION", "AWS_PROFILE", "DYNAMODB_PROFILE", "DYNAMODB_ENDPOINT_URL",
                 "DYNAMODB_TABLE_PREFIX", "DYNAMODB_DEBUG_LOGGING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        profile_name=None,
        region_name="eu-central-1",
        endpoint_url=None  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_aws_backend():
    """Activate moto for the duration of a test."""
    with mock_aws():
        yield


@pytest.fixture
def connection(mock_aws_backend, mock_dynamodb_config):
    """Open connection against moto, closed after the test."""
    conn = DynamoDBConnection(mock_dynamodb_config).open()
    yield conn
    conn.close()


@pytest.fixture
def accounts_table(connection):
    """Create the Accounts table in moto."""
    TableAdmin(connection).create_table(AccountsTable)
    return connection.table(AccountsTable.table_name)


@pytest.fixture
def client(connection, accounts_table):
    """Account store client with the Accounts table in place."""
    return AccountStoreClient(connection)


@pytest.fixture
def sample_account():
    """The account stored first by the demo script."""
    return Account(name="Foo", key="123456", description="My first account")


# ===== DynamoDB Local Integration Fixtures =====

def _dynamodb_local_running() -> bool:
    try:
        # DynamoDB Local answers a bare GET with 400; any answer means it is up
        requests.get(LOCAL_ENDPOINT, timeout=2)
        return True
    except requests.RequestException:
        return False


@pytest.fixture(scope="session")
def dynamodb_local():
    """Skip unless DynamoDB Local is listening on 127.0.0.1:8000."""
    if not _dynamodb_local_running():
        pytest.skip("DynamoDB Local is not running on 127.0.0.1:8000")
    return LOCAL_ENDPOINT


@pytest.fixture
def local_config(dynamodb_local, request):
    """Configuration for DynamoDB Local with a per-test table prefix."""
    config = DynamoDBConfig.for_local_development(endpoint_url=dynamodb_local)
    config.table_prefix = f"it_{request.node.name[:40]}_{os.getpid()}"
    return config


@pytest.fixture
def local_client(local_config):
    """Client against DynamoDB Local; drops its table afterwards."""
    with DynamoDBConnection(local_config) as conn:
        client = AccountStoreClient(conn)
        client.ensure_table()
        yield client
        conn.client.delete_table(TableName=client.table_name)

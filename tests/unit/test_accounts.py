"""
Tests for the account read/write APIs (handlers/accounts) against moto.
"""

import pytest
from unittest.mock import Mock, patch

from boto3.dynamodb.conditions import Key

from account_store.exceptions import DataIntegrityError, NotFoundError, SerializationError
from account_store.handlers import AccountReadApi, AccountWriteApi
from account_store.models import Account


class TestAccountRoundTrip:
    """Put/find/list/delete behaviour."""

    def test_put_then_find(self, client, sample_account):
        client.put_account(sample_account)

        found = client.find_account("Foo")

        assert found == sample_account

    def test_find_on_empty_table(self, client):
        assert client.find_account("Foo") is None

    def test_find_unknown_name(self, client, sample_account):
        client.put_account(sample_account)

        assert client.find_account("Bar") is None

    def test_find_is_exact_match(self, client, sample_account):
        client.put_account(sample_account)

        assert client.find_account("foo") is None
        assert client.find_account("Fo") is None

    def test_put_is_upsert(self, client):
        client.put_account(Account(name="Foo", key="1", description="first"))
        client.put_account(Account(name="Foo", key="1", description="second"))

        assert client.find_account("Foo").description == "second"
        assert len(client.list_accounts()) == 1

    def test_put_returns_account(self, client, sample_account):
        assert client.put_account(sample_account) is sample_account

    def test_stored_row_layout(self, client, accounts_table, sample_account):
        client.put_account(sample_account)

        row = accounts_table.get_item(Key={'AccountName': 'Foo'})['Item']

        assert row == {
            'AccountName': 'Foo',
            'Data': {'object': {'name': 'Foo', 'key': '123456', 'description': 'My first account'}}
        }

    def test_delete_removes_visibility(self, client, sample_account):
        client.put_account(sample_account)

        client.delete_account("Foo")

        assert client.find_account("Foo") is None
        assert client.list_accounts() == []

    def test_delete_missing_is_not_an_error(self, client):
        client.delete_account("Nobody")

    def test_find_empty_name(self, client, sample_account):
        client.put_account(sample_account)

        assert client.find_account("") is None

    def test_delete_empty_name(self, client, sample_account):
        client.put_account(sample_account)

        client.delete_account("")

        assert client.list_accounts() == [sample_account]

    def test_list_returns_all_puts(self, client):
        stored = [Account(name=f"acct-{i:03d}", key=str(i), description=f"account {i}") for i in range(25)]
        for account in stored:
            client.put_account(account)

        listed = client.list_accounts()

        assert sorted(listed, key=lambda a: a.name) == stored

    def test_list_returns_full_page(self, client):
        stored = [Account(name=f"acct-{i:03d}", key=str(i)) for i in range(100)]
        for account in stored:
            client.put_account(account)

        assert sorted(client.list_accounts(), key=lambda a: a.name) == stored

    def test_list_is_capped_at_one_page(self, client):
        for i in range(105):
            client.put_account(Account(name=f"acct-{i:03d}", key=str(i)))

        assert len(client.list_accounts()) == 100

    def test_list_custom_limit(self, client):
        for i in range(5):
            client.put_account(Account(name=f"acct-{i}", key=str(i)))

        assert len(client.list_accounts(limit=3)) == 3

    def test_example_scenario(self, client, sample_account):
        client.put_account(sample_account)
        assert client.find_account("Foo") == sample_account

        fum = Account(name="Fum", key="654321", description="My second account")
        client.put_account(fum)
        assert sorted(a.name for a in client.list_accounts()) == ["Foo", "Fum"]

        client.delete_account("Foo")
        assert client.list_accounts() == [fum]


class TestMissingTable:
    """Operations without the Accounts table."""

    def test_find_without_table(self, connection):
        with pytest.raises(NotFoundError):
            AccountReadApi(connection).find_account("Foo")

    def test_put_without_table(self, connection, sample_account):
        with pytest.raises(NotFoundError):
            AccountWriteApi(connection).put_account(sample_account)


class TestCorruptRows:
    """Rows that were not written by this library."""

    def test_list_with_row_missing_payload(self, client, accounts_table):
        accounts_table.put_item(Item={'AccountName': 'Broken'})

        with pytest.raises(SerializationError):
            client.list_accounts()

    def test_find_with_row_missing_payload(self, client, accounts_table):
        accounts_table.put_item(Item={'AccountName': 'Broken', 'Data': {'other': 'x'}})

        with pytest.raises(SerializationError):
            client.find_account('Broken')


class TestReadApiRequests:
    """Request shapes sent to the gateway."""

    @pytest.fixture
    def read_api(self, mock_dynamodb_config):
        connection = Mock()
        connection.config = mock_dynamodb_config
        gateway = Mock()
        gateway.table_name = "Accounts"
        with patch('account_store.handlers.accounts.queries.create_table_gateway', return_value=gateway):
            api = AccountReadApi(connection)
        return api

    def test_find_uses_consistent_single_row_query(self, read_api):
        read_api.gateway.query.return_value = {'Items': [], 'Count': 0}

        read_api.find_account("Foo")

        read_api.gateway.query.assert_called_once_with(
            KeyConditionExpression=Key('AccountName').eq('Foo'),
            ConsistentRead=True,
            Limit=1
        )

    def test_list_uses_consistent_capped_scan(self, read_api):
        read_api.gateway.scan.return_value = {'Items': [], 'Count': 0}

        read_api.list_accounts()

        read_api.gateway.scan.assert_called_once_with(ConsistentRead=True, Limit=100)

    def test_multiple_matches_raise_data_integrity_error(self, read_api):
        row = {'AccountName': 'Foo', 'Data': {'object': {'name': 'Foo', 'key': '1', 'description': ''}}}
        read_api.gateway.query.return_value = {'Items': [row, row], 'Count': 2}

        with pytest.raises(DataIntegrityError) as exc_info:
            read_api.find_account("Foo")

        assert exc_info.value.count == 2
        assert exc_info.value.key == {'AccountName': 'Foo'}

    def test_find_empty_name_sends_no_query(self, read_api):
        assert read_api.find_account("") is None

        read_api.gateway.query.assert_not_called()


class TestWriteApiRequests:
    """Request shapes sent to the gateway by the write API."""

    @pytest.fixture
    def write_api(self, mock_dynamodb_config):
        connection = Mock()
        connection.config = mock_dynamodb_config
        with patch('account_store.handlers.accounts.commands.create_table_gateway', return_value=Mock()):
            api = AccountWriteApi(connection)
        return api

    def test_delete_targets_partition_key(self, write_api):
        write_api.delete_account("Foo")

        write_api.gateway.delete_item.assert_called_once_with({'AccountName': 'Foo'})

    def test_delete_empty_name_sends_no_request(self, write_api):
        write_api.delete_account("")

        write_api.gateway.delete_item.assert_not_called()

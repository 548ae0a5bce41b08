from __future__ import annotations

from datetime import datetime, timezone

from .conftest import (
    COLLECTION_RESPONSE_JSON,
    ERROR_RESPONSE_WITH_MESSAGE,
    ITEM_RESPONSE_JSON,
    USER_TOKEN,
    assert_basic_auth_headers,
    assert_user_token_headers,
)

CONNECTION_JSON = '{ "_id": "conn_1111111111111111111111111", "name": "ASB", "logo": "https://static.akahu.io/asb.png" }'
ME_JSON = (
    '{ "_id": "user_1111111111111111111111111", "created_at": "2020-04-08T23:15:39.917Z", '
    '"email": "user@example.com", "first_name": "Jo", "preferred_name": null }'
)


def test_list_connections(mock_api):
    client, sent = mock_api(COLLECTION_RESPONSE_JSON % CONNECTION_JSON)

    result = client.connections.list()

    assert sent[0].url.path == "/v1/connections"
    assert_basic_auth_headers(sent[0])
    assert result.data[0].name == "ASB"
    assert result.data[0].url is None


def test_get_connection(mock_api):
    client, sent = mock_api(ITEM_RESPONSE_JSON % CONNECTION_JSON)

    result = client.connections.get("conn_1111111111111111111111111")

    assert sent[0].url.path == "/v1/connections/conn_1111111111111111111111111"
    assert_basic_auth_headers(sent[0])
    assert result.data.id == "conn_1111111111111111111111111"


def test_get_connection_error(mock_api):
    client, _ = mock_api(ERROR_RESPONSE_WITH_MESSAGE, status_code=403)

    result = client.connections.get("conn_1")

    assert result.success is False
    assert result.message == "Error"


def test_me(mock_api):
    client, sent = mock_api(ITEM_RESPONSE_JSON % ME_JSON)

    result = client.me.get(USER_TOKEN)

    assert sent[0].url.path == "/v1/me"
    assert_user_token_headers(sent[0])
    me = result.data
    assert me.id == "user_1111111111111111111111111"
    assert me.created_at == datetime(2020, 4, 8, 23, 15, 39, 917000, tzinfo=timezone.utc)
    assert me.email == "user@example.com"
    assert me.first_name == "Jo"
    assert me.mobile is None
    assert me.preferred_name is None

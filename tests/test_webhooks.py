from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from akahu.exceptions import RemoteError
from akahu.models import WebhookEventStatus, WebhookSubscribeRequest, WebhookType

from .conftest import (
    COLLECTION_RESPONSE_JSON,
    ERROR_RESPONSE_WITH_MESSAGE,
    ITEM_RESPONSE_JSON,
    USER_TOKEN,
    assert_basic_auth_headers,
    assert_user_token_headers,
)

WEBHOOK_JSON = (
    '{ "_id": "hook_1111111111111111111111111", "created_at": "2020-04-08T23:15:39.917Z", '
    '"updated_at": "2020-04-09T23:15:39.917Z", "last_called_at": "2020-04-10T23:15:39.917Z", '
    '"state": "foobarbaz", "url": "https://webhooks.myapp.com/akahu" }'
)
WEBHOOK_EVENT_JSON = (
    '{ "_id": "hook_1111111111111111111111111", "hook": "hook_1111111111111111111111112", "status": "FAILED", '
    '"created_at": "2020-04-08T23:15:39.917Z", "updated_at": "2020-04-09T23:15:39.917Z", '
    '"last_failed_at": "2020-04-10T23:15:39.917Z", '
    '"payload": { "success": true, "webhook_type": "TOKEN", "webhook_code": "test_1234" } }'
)
PUBLIC_KEY = "-----BEGIN RSA PUBLIC KEY----- { PEM ENCODED PUBLIC KEY } -----END RSA PUBLIC KEY-----"


def test_list_webhooks(mock_api):
    client, sent = mock_api(COLLECTION_RESPONSE_JSON % WEBHOOK_JSON)

    result = client.webhooks.list(USER_TOKEN)

    assert sent[0].method == "GET"
    assert sent[0].url.path == "/v1/webhooks"
    assert_user_token_headers(sent[0])
    webhook = result.data[0]
    assert webhook.id == "hook_1111111111111111111111111"
    assert webhook.last_called_at == datetime(2020, 4, 10, 23, 15, 39, 917000, tzinfo=timezone.utc)
    assert webhook.state == "foobarbaz"
    assert webhook.url == "https://webhooks.myapp.com/akahu"


def test_list_webhooks_empty(mock_api):
    client, _ = mock_api(COLLECTION_RESPONSE_JSON % "")

    assert client.webhooks.list(USER_TOKEN).data == []


def test_get_public_key_uses_app_credentials(mock_api):
    client, sent = mock_api(ITEM_RESPONSE_JSON % json.dumps(PUBLIC_KEY))

    result = client.webhooks.get_public_key("key_1")

    assert sent[0].method == "GET"
    assert sent[0].url.path == "/v1/keys/key_1"
    assert_basic_auth_headers(sent[0])
    assert result.data == PUBLIC_KEY


def test_get_public_key_error(mock_api):
    client, _ = mock_api(ERROR_RESPONSE_WITH_MESSAGE, status_code=400)

    result = client.webhooks.get_public_key("key_1")

    assert result.data is None
    with pytest.raises(RemoteError, match="Error"):
        result.raise_for_error()


def test_list_events(mock_api):
    client, sent = mock_api(COLLECTION_RESPONSE_JSON % WEBHOOK_EVENT_JSON)

    result = client.webhooks.list_events(
        USER_TOKEN,
        "FAILED",
        datetime(2020, 10, 1, tzinfo=timezone.utc),
        datetime(2020, 10, 5, tzinfo=timezone.utc),
    )

    params = sent[0].url.params
    assert sent[0].url.path == "/v1/webhook-events"
    assert params["start"] == "2020-10-01T00:00:00Z"
    assert params["end"] == "2020-10-05T00:00:00Z"
    assert params["status"] == "FAILED"
    assert_user_token_headers(sent[0])
    event = result.data[0]
    assert event.hook == "hook_1111111111111111111111112"
    assert event.status == WebhookEventStatus.FAILED
    assert event.payload.success is True
    assert event.payload.webhook_type == WebhookType.TOKEN
    assert event.payload.webhook_code == "test_1234"


def test_subscribe(mock_api):
    client, sent = mock_api('{"success": true, "item_id": "hook_1111111111111111111111111" }')
    request = WebhookSubscribeRequest(webhook_type=WebhookType.TOKEN, state="state123")

    result = client.webhooks.subscribe(USER_TOKEN, request)

    assert sent[0].method == "POST"
    assert sent[0].url.path == "/v1/webhooks"
    assert_user_token_headers(sent[0])
    assert json.loads(sent[0].content) == {"webhook_type": "TOKEN", "state": "state123"}
    assert result.data == "hook_1111111111111111111111111"


def test_subscribe_error(mock_api):
    client, _ = mock_api(ERROR_RESPONSE_WITH_MESSAGE, status_code=400)

    result = client.webhooks.subscribe(USER_TOKEN, WebhookSubscribeRequest(webhook_type=WebhookType.ACCOUNT))

    assert result.success is False
    assert result.data is None


def test_unsubscribe(mock_api):
    client, sent = mock_api('{ "success": true }')

    result = client.webhooks.unsubscribe(USER_TOKEN, "hook_1")

    assert sent[0].method == "DELETE"
    assert sent[0].url.path == "/v1/webhooks/hook_1"
    assert_user_token_headers(sent[0])
    assert result.data is True

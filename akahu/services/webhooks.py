from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..envelope import APIResponse, CollectionResponse, ItemResponse, SuccessResponse
from ..models import Webhook, WebhookEvent, WebhookSubscribeRequest, WebhookSubscribeResponse
from ..utils import params_with_date_range, path_with_params
from .base import Service

WEBHOOKS_PATH = "webhooks"
WEBHOOK_EVENTS_PATH = "webhook-events"
PUBLIC_KEY_PATH = "keys"


class WebhooksService(Service):
    def list(self, user_access_token: str) -> APIResponse[List[Webhook]]:
        """Active webhook subscriptions the application created for the user.

        Akahu docs: https://developers.akahu.nz/reference/get_webhooks
        """
        return self._client.call(
            "GET",
            WEBHOOKS_PATH,
            CollectionResponse[Webhook],
            auth=self._client.user_auth(user_access_token),
        )

    def get_public_key(self, key_id: str) -> APIResponse[str]:
        """PEM encoded public key Akahu signs webhooks with.

        ``key_id`` comes from the ``X-Akahu-Signing-Key`` header of the
        webhook request. Pass the result to
        :func:`akahu.signatures.verify_webhook_signature`.

        Akahu docs: https://developers.akahu.nz/reference/get_keys-id
        """
        return self._client.call("GET", f"{PUBLIC_KEY_PATH}/{key_id}", ItemResponse[str], auth=self._client.app_auth())

    def list_events(
        self,
        user_access_token: str,
        status: str,
        start: datetime,
        end: datetime,
    ) -> APIResponse[List[WebhookEvent]]:
        """Webhook events published to the application between ``start`` and ``end``.

        Akahu docs: https://developers.akahu.nz/reference/get_webhook-events
        """
        params = params_with_date_range(start, end)
        params["status"] = status
        return self._client.call(
            "GET",
            path_with_params(WEBHOOK_EVENTS_PATH, params),
            CollectionResponse[WebhookEvent],
            auth=self._client.user_auth(user_access_token),
        )

    def subscribe(self, user_access_token: str, request: WebhookSubscribeRequest) -> APIResponse[Optional[str]]:
        """Create a webhook subscription; ``data`` is the new subscription id.

        Akahu docs: https://developers.akahu.nz/reference/post_webhooks
        """
        return self._client.call(
            "POST",
            WEBHOOKS_PATH,
            WebhookSubscribeResponse,
            auth=self._client.user_auth(user_access_token),
            body=request,
        )

    def unsubscribe(self, user_access_token: str, webhook_id: str) -> APIResponse[bool]:
        """Akahu docs: https://developers.akahu.nz/reference/delete_webhooks-id"""
        return self._client.call(
            "DELETE",
            f"{WEBHOOKS_PATH}/{webhook_id}",
            SuccessResponse,
            auth=self._client.user_auth(user_access_token),
        )

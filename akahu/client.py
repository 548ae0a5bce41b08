from __future__ import annotations

import json
import logging
from typing import Any, Optional, Type
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel

from .config import DEFAULT_BASE_URL, DEFAULT_OAUTH_URL, DEFAULT_TIMEOUT_SECONDS, Settings
from .credentials import AppBasicAuth, UserToken
from .envelope import APIResponse, decode, is_success_status
from .exceptions import TransportError
from .services import (
    AccountsService,
    AuthService,
    ConnectionsService,
    MeService,
    TransactionsService,
    WebhooksService,
)

logger = logging.getLogger(__name__)
DEFAULT_TIMEOUT = httpx.Timeout(DEFAULT_TIMEOUT_SECONDS, connect=5.0)
JSON_CONTENT_TYPE = "application/json"


def _to_jsonable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


class AkahuClient:
    """Entry point to the Akahu API.

    Resources hang off the client as services (``client.accounts``,
    ``client.transactions`` ...). Each service method picks the credential
    scheme its endpoint requires and returns an :class:`APIResponse`.
    """

    def __init__(
        self,
        app_id_token: str,
        app_secret: str = "",
        redirect_uri: str = "",
        http_client: Optional[httpx.Client] = None,
        base_url: str = DEFAULT_BASE_URL,
        oauth_url: str = DEFAULT_OAUTH_URL,
    ):
        if not app_id_token:
            raise ValueError("app_id_token is required.")

        self.app_id_token = app_id_token
        self.app_secret = app_secret
        self.redirect_uri = redirect_uri
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.oauth_url = oauth_url
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)

        self.accounts = AccountsService(self)
        self.auth = AuthService(self)
        self.connections = ConnectionsService(self)
        self.me = MeService(self)
        self.transactions = TransactionsService(self)
        self.webhooks = WebhooksService(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, http_client: Optional[httpx.Client] = None) -> "AkahuClient":
        settings = settings or Settings()
        owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=httpx.Timeout(settings.timeout, connect=5.0))

        client = cls(
            settings.app_id_token or "",
            settings.app_secret or "",
            settings.redirect_uri,
            http_client=http_client,
            base_url=settings.base_url,
            oauth_url=settings.oauth_url,
        )
        client._owns_client = owns_client
        return client

    def user_auth(self, user_access_token: str) -> UserToken:
        return UserToken(self.app_id_token, user_access_token)

    def app_auth(self) -> AppBasicAuth:
        return AppBasicAuth(self.app_id_token, self.app_secret)

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for ``path`` relative to the API base URL."""
        headers = {"Accept": JSON_CONTENT_TYPE}
        content: Optional[bytes] = None
        if body is not None:
            content = json.dumps(_to_jsonable(body), ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return self._client.build_request(method, urljoin(self.base_url, path), content=content, headers=headers)

    def do(
        self,
        request: httpx.Request,
        envelope_type: Type[BaseModel],
        auth: Optional[httpx.Auth] = None,
    ) -> APIResponse[Any]:
        """Send ``request`` and decode the body against ``envelope_type``."""
        logger.debug("Akahu request %s %s", request.method, request.url)
        try:
            response = self._client.send(request, auth=auth)
        except httpx.HTTPError as exc:
            logger.error("Akahu request %s %s failed: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        if not is_success_status(response.status_code):
            logger.info(
                "Akahu request %s %s returned status %s",
                request.method,
                request.url,
                response.status_code,
            )
        return decode(response.status_code, response.content, envelope_type, response=response)

    def call(
        self,
        method: str,
        path: str,
        envelope_type: Type[BaseModel],
        auth: Optional[httpx.Auth] = None,
        body: Any = None,
    ) -> APIResponse[Any]:
        return self.do(self.new_request(method, path, body), envelope_type, auth=auth)

    def close(self) -> None:
        """Dispose the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "AkahuClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

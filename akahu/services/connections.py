from __future__ import annotations

from typing import List

from ..envelope import APIResponse, CollectionResponse, ItemResponse
from ..models import Connection
from .base import Service

CONNECTIONS_PATH = "connections"


class ConnectionsService(Service):
    """Financial institutions available to the application (app credentials)."""

    def list(self) -> APIResponse[List[Connection]]:
        # https://developers.akahu.nz/reference/get_connections
        return self._client.call("GET", CONNECTIONS_PATH, CollectionResponse[Connection], auth=self._client.app_auth())

    def get(self, connection_id: str) -> APIResponse[Connection]:
        # https://developers.akahu.nz/reference/get_connections-id
        return self._client.call(
            "GET",
            f"{CONNECTIONS_PATH}/{connection_id}",
            ItemResponse[Connection],
            auth=self._client.app_auth(),
        )

from __future__ import annotations

from ..envelope import APIResponse, ItemResponse
from ..models import Me
from .base import Service


class MeService(Service):
    def get(self, user_access_token: str) -> APIResponse[Me]:
        return self._client.call("GET", "me", ItemResponse[Me], auth=self._client.user_auth(user_access_token))

"""Credential schemes attached to outbound requests.

Akahu endpoints accept one of two schemes and the choice belongs to the
endpoint: user scoped calls carry the app id header plus a bearer token,
app scoped calls carry HTTP Basic credentials built from the app id and
secret. Both are ``httpx.Auth`` flows so they run right before the request
is sent.
"""
from __future__ import annotations

import base64
from typing import Generator

import httpx

AKAHU_ID_HEADER = "X-Akahu-ID"


class UserToken(httpx.Auth):
    """Bearer auth on behalf of a user; the token is passed through untouched."""

    def __init__(self, app_id_token: str, user_access_token: str):
        self.app_id_token = app_id_token
        self.user_access_token = user_access_token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[AKAHU_ID_HEADER] = self.app_id_token
        request.headers["Authorization"] = f"Bearer {self.user_access_token}"
        yield request


class AppBasicAuth(httpx.Auth):
    """App level Basic auth: ``base64(app_id_token:app_secret)``."""

    def __init__(self, app_id_token: str, app_secret: str):
        self.app_id_token = app_id_token
        self.app_secret = app_secret

    @property
    def credentials(self) -> str:
        raw = f"{self.app_id_token}:{self.app_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Basic {self.credentials}"
        yield request

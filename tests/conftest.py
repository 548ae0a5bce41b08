"""Shared fixtures: a mocked Akahu transport and RSA key material."""
from __future__ import annotations

import base64
from typing import Callable, List, Tuple

import httpx
import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from akahu import AkahuClient

APP_TOKEN = "app_token_123"
APP_SECRET = "appSecret123"
USER_TOKEN = "user_token_1"
REDIRECT_URI = "https://example.com/auth/akahu"

ITEM_RESPONSE_JSON = '{ "success": true, "item": %s }'
COLLECTION_RESPONSE_JSON = '{ "success": true, "items": [%s] }'
ERROR_RESPONSE_WITH_MESSAGE = '{ "success": false, "message": "Error" }'
ERROR_RESPONSE_WITH_ERROR = '{ "success": false, "error": "Error" }'

MockApi = Callable[..., Tuple[AkahuClient, List[httpx.Request]]]


@pytest.fixture
def mock_api() -> MockApi:
    """Build a client whose transport answers every call with ``body``.

    Returns the client and the list that collects the requests it sends.
    """

    def _build(body: str, status_code: int = 200) -> Tuple[AkahuClient, List[httpx.Request]]:
        sent: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(status_code, content=body.encode("utf-8"))

        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = AkahuClient(APP_TOKEN, APP_SECRET, REDIRECT_URI, http_client=http_client)
        return client, sent

    return _build


def assert_user_token_headers(request: httpx.Request, user_token: str = USER_TOKEN) -> None:
    assert request.headers["X-Akahu-ID"] == APP_TOKEN
    assert request.headers["Authorization"] == f"Bearer {user_token}"


def assert_basic_auth_headers(request: httpx.Request) -> None:
    # base64("app_token_123:appSecret123")
    assert request.headers["Authorization"] == "Basic YXBwX3Rva2VuXzEyMzphcHBTZWNyZXQxMjM="
    assert "X-Akahu-ID" not in request.headers


@pytest.fixture(scope="session")
def private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(private_key: rsa.RSAPrivateKey) -> str:
    """The public key as Akahu publishes it: PEM wrapped PKCS#1."""
    return private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.PKCS1,
    ).decode("ascii")


@pytest.fixture(scope="session")
def spki_public_key_pem(private_key: rsa.RSAPrivateKey) -> str:
    return private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def sign() -> Callable[[rsa.RSAPrivateKey, bytes], str]:
    def _sign(key: rsa.RSAPrivateKey, body: bytes) -> str:
        signature = key.sign(body, padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    return _sign

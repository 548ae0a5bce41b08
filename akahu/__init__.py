"""Python client for the Akahu financial data API."""

from .client import AkahuClient
from .config import Settings
from .credentials import AppBasicAuth, UserToken
from .envelope import APIResponse
from .exceptions import (
    AkahuError,
    DecodeError,
    InvalidKeyFormat,
    InvalidSignatureFormat,
    RemoteError,
    SignatureError,
    TransportError,
)
from .signatures import verify_webhook_request, verify_webhook_signature

__all__ = [
    "AkahuClient",
    "APIResponse",
    "AppBasicAuth",
    "AkahuError",
    "DecodeError",
    "InvalidKeyFormat",
    "InvalidSignatureFormat",
    "RemoteError",
    "Settings",
    "SignatureError",
    "TransportError",
    "UserToken",
    "verify_webhook_request",
    "verify_webhook_signature",
]

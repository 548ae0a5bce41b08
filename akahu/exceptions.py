"""Error hierarchy raised by the Akahu client."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .envelope import APIResponse


class AkahuError(Exception):
    """Base class for every error raised by this package."""


class TransportError(AkahuError):
    """The HTTP exchange itself failed (network, DNS, TLS, timeout)."""


class DecodeError(AkahuError):
    """The response body did not match the expected envelope shape."""

    def __init__(self, message: str, status_code: Optional[int] = None, content: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.content = content


class RemoteError(AkahuError):
    """Akahu answered with an unsuccessful envelope."""

    def __init__(self, api_response: "APIResponse[Any]"):
        self.api_response = api_response
        self.message = api_response.message
        self.status_code = api_response.status_code
        super().__init__(f"Akahu request failed with status {self.status_code}: {self.message or '<no message>'}")


class SignatureError(AkahuError):
    """Webhook signature inputs could not be evaluated."""


class InvalidKeyFormat(SignatureError):
    """The public key is not a PEM encoded PKCS#1 RSA public key."""


class InvalidSignatureFormat(SignatureError):
    """The signature is not valid base64."""

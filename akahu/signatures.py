"""Webhook signature verification.

Akahu signs every webhook body with an RSA private key (PKCS#1 v1.5 over a
SHA-256 digest) and sends the base64 signature in the ``X-Akahu-Signature``
header. The matching public key is published as a PEM encoded PKCS#1
``RSA PUBLIC KEY`` and can be fetched with
:meth:`akahu.services.webhooks.WebhooksService.get_public_key` using the id
from the ``X-Akahu-Signing-Key`` header.

Malformed inputs raise :class:`~akahu.exceptions.SignatureError` subclasses;
a well formed signature that does not match simply returns ``False``.
"""
from __future__ import annotations

import base64
import binascii
import hashlib
import re
from typing import Mapping

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from .exceptions import InvalidKeyFormat, InvalidSignatureFormat

SIGNATURE_HEADER = "X-Akahu-Signature"
SIGNING_KEY_HEADER = "X-Akahu-Signing-Key"

_PEM_BLOCK = re.compile(
    r"-----BEGIN (?P<label>[A-Z0-9 ]+)-----(?P<body>.*?)-----END (?P=label)-----",
    re.DOTALL,
)


def _decode_pem_block(public_key: str) -> bytes:
    match = _PEM_BLOCK.search(public_key)
    if match is None:
        raise InvalidKeyFormat("no PEM block found in public key")

    body = "".join(match.group("body").split())
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidKeyFormat("PEM block body is not valid base64") from exc


def _parse_pkcs1_public_key(der: bytes) -> rsa.RSAPublicKey:
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyFormat("PEM block is not an RSA public key") from exc

    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyFormat("PEM block is not an RSA public key")

    # load_der_public_key also accepts SubjectPublicKeyInfo; only a bare
    # PKCS#1 RSAPublicKey re-encodes to the exact input bytes.
    pkcs1 = key.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.PKCS1)
    if pkcs1 != der:
        raise InvalidKeyFormat("public key is not in PKCS#1 format")
    return key


def _decode_signature(signature: str) -> bytes:
    try:
        return base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidSignatureFormat("signature is not valid base64") from exc


def verify_webhook_signature(public_key: str, signature: str, body: bytes) -> bool:
    """Check that ``body`` was signed by the holder of ``public_key``.

    Args:
        public_key: PEM encoded PKCS#1 RSA public key.
        signature: Base64 encoded PKCS#1 v1.5 signature.
        body: The raw request body exactly as received.

    Returns:
        ``True`` when the signature matches, ``False`` otherwise.

    Raises:
        InvalidKeyFormat: ``public_key`` has no PEM block or is not PKCS#1.
        InvalidSignatureFormat: ``signature`` is not valid base64.
    """
    key = _parse_pkcs1_public_key(_decode_pem_block(public_key))
    raw_signature = _decode_signature(signature)
    digest = hashlib.sha256(body).digest()

    try:
        key.verify(raw_signature, digest, padding.PKCS1v15(), Prehashed(hashes.SHA256()))
    except InvalidSignature:
        return False
    return True


def verify_webhook_request(public_key: str, headers: Mapping[str, str], body: bytes) -> bool:
    """Verify a webhook using the signature carried in its headers."""
    signature = headers.get(SIGNATURE_HEADER)
    if signature is None:
        # httpx/starlette headers are case-insensitive, plain dicts are not
        lowered = {name.lower(): value for name, value in headers.items()}
        signature = lowered.get(SIGNATURE_HEADER.lower())
    if not signature:
        raise InvalidSignatureFormat(f"missing {SIGNATURE_HEADER} header")
    return verify_webhook_signature(public_key, signature, body)

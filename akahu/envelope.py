"""Decoding of the Akahu response envelope.

Every Akahu endpoint answers with the same wrapper::

    {"success": true, "item": {...}}           # single resource
    {"success": true, "items": [{...}, ...]}   # collection
    {"success": false, "message": "..."}       # failure, sometimes "error"

The functions below turn a status code and a raw body into one
:class:`APIResponse` regardless of the payload type. 2xx bodies are validated
against the expected envelope model; anything else is read as an
:class:`ErrorResponse`. Validation problems are never swallowed, they surface
as :class:`~akahu.exceptions.DecodeError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .exceptions import DecodeError, RemoteError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class SuccessResponse(BaseModel):
    """Bare envelope, used by endpoints that only report ``success``."""

    success: bool = False

    def payload(self) -> Any:
        return self.success


class ItemResponse(SuccessResponse, Generic[T]):
    item: Optional[T]

    def payload(self) -> Any:
        return self.item


class CollectionResponse(SuccessResponse, Generic[T]):
    items: List[T]

    def payload(self) -> Any:
        return self.items


class ErrorResponse(BaseModel):
    """Failure envelope. Akahu uses ``message`` or ``error`` for the text."""

    success: bool = False
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def normalized_message(self) -> str:
        # Precedence of message over error is inferred, not documented upstream.
        return self.message or self.error or ""


@dataclass
class APIResponse(Generic[T]):
    """Normalized outcome of one Akahu call."""

    success: bool
    status_code: int
    message: str = ""
    data: Optional[T] = None
    response: Optional[httpx.Response] = None

    @property
    def headers(self) -> httpx.Headers:
        if self.response is None:
            return httpx.Headers()
        return self.response.headers

    def raise_for_error(self) -> "APIResponse[T]":
        """Raise :class:`RemoteError` unless the call succeeded."""
        if not self.success:
            raise RemoteError(self)
        return self


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _validate(model: Type[M], status_code: int, content: bytes) -> M:
    try:
        return model.model_validate_json(content)
    except ValidationError as exc:
        raise DecodeError(
            f"Could not decode {model.__name__} from response with status {status_code}: {exc}",
            status_code=status_code,
            content=content,
        ) from exc


def decode(
    status_code: int,
    content: bytes,
    envelope_type: Type[BaseModel],
    response: Optional[httpx.Response] = None,
) -> APIResponse[Any]:
    """Decode ``content`` into an :class:`APIResponse`.

    ``envelope_type`` describes the whole 2xx body. For envelope models the
    payload is unwrapped (``item``, ``items`` or the ``success`` flag); any
    other model is returned as is.
    """
    if is_success_status(status_code):
        body = _validate(envelope_type, status_code, content)
        data = body.payload() if isinstance(body, SuccessResponse) else body
        return APIResponse(success=True, status_code=status_code, data=data, response=response)

    error = _validate(ErrorResponse, status_code, content)
    return APIResponse(
        success=error.success,
        status_code=status_code,
        message=error.normalized_message,
        response=response,
    )


def decode_item(
    status_code: int,
    content: bytes,
    model: Any,
    response: Optional[httpx.Response] = None,
) -> APIResponse[Any]:
    """Decode a ``{"success": ..., "item": ...}`` body."""
    return decode(status_code, content, ItemResponse[model], response=response)


def decode_collection(
    status_code: int,
    content: bytes,
    model: Any,
    response: Optional[httpx.Response] = None,
) -> APIResponse[Any]:
    """Decode a ``{"success": ..., "items": [...]}`` body."""
    return decode(status_code, content, CollectionResponse[model], response=response)

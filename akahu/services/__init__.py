"""Per-resource request builders attached to :class:`akahu.client.AkahuClient`."""

from .accounts import AccountsService
from .auth import AuthService
from .connections import ConnectionsService
from .me import MeService
from .transactions import TransactionsService
from .webhooks import WebhooksService

__all__ = [
    "AccountsService",
    "AuthService",
    "ConnectionsService",
    "MeService",
    "TransactionsService",
    "WebhooksService",
]

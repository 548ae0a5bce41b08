from __future__ import annotations

from datetime import datetime
from typing import List

from ..envelope import APIResponse, CollectionResponse, ItemResponse
from ..models import Transaction
from ..utils import params_with_date_range, path_with_params
from .base import Service

TRANSACTIONS_PATH = "transactions"
PENDING_PATH = f"{TRANSACTIONS_PATH}/pending"


class TransactionsService(Service):
    """Transactions across the user's connected accounts. Dates are UTC."""

    def list(self, user_access_token: str, start: datetime, end: datetime) -> APIResponse[List[Transaction]]:
        """Settled transactions between ``start`` and ``end``.

        Akahu docs: https://developers.akahu.nz/reference/get_transactions
        """
        return self._list(TRANSACTIONS_PATH, user_access_token, start, end)

    def list_pending(self, user_access_token: str, start: datetime, end: datetime) -> APIResponse[List[Transaction]]:
        """Pending transactions between ``start`` and ``end``.

        Akahu docs: https://developers.akahu.nz/reference/get_transactions-pending
        """
        return self._list(PENDING_PATH, user_access_token, start, end)

    def get(self, user_access_token: str, transaction_id: str) -> APIResponse[Transaction]:
        # https://developers.akahu.nz/reference/get_transactions-id
        return self._client.call(
            "GET",
            f"{TRANSACTIONS_PATH}/{transaction_id}",
            ItemResponse[Transaction],
            auth=self._client.user_auth(user_access_token),
        )

    def get_by_ids(self, user_access_token: str, *transaction_ids: str) -> APIResponse[List[Transaction]]:
        # https://developers.akahu.nz/reference/post_transactions-ids
        return self._client.call(
            "POST",
            f"{TRANSACTIONS_PATH}/ids",
            CollectionResponse[Transaction],
            auth=self._client.user_auth(user_access_token),
            body=list(transaction_ids),
        )

    def _list(self, path: str, user_access_token: str, start: datetime, end: datetime) -> APIResponse[List[Transaction]]:
        return self._client.call(
            "GET",
            path_with_params(path, params_with_date_range(start, end)),
            CollectionResponse[Transaction],
            auth=self._client.user_auth(user_access_token),
        )

from __future__ import annotations

from typing import List

from ..envelope import APIResponse, CollectionResponse, ItemResponse, SuccessResponse
from ..models import Account
from .base import Service

ACCOUNTS_PATH = "accounts"


class AccountsService(Service):
    def list(self, user_access_token: str) -> APIResponse[List[Account]]:
        """All accounts the user has connected to the application.

        Akahu docs: https://developers.akahu.nz/reference/get_accounts
        """
        return self._client.call(
            "GET",
            ACCOUNTS_PATH,
            CollectionResponse[Account],
            auth=self._client.user_auth(user_access_token),
        )

    def get(self, user_access_token: str, account_id: str) -> APIResponse[Account]:
        """A single connected account.

        Akahu docs: https://developers.akahu.nz/reference/get_accounts-id
        """
        return self._client.call(
            "GET",
            f"{ACCOUNTS_PATH}/{account_id}",
            ItemResponse[Account],
            auth=self._client.user_auth(user_access_token),
        )

    def revoke(self, user_access_token: str, account_id: str) -> APIResponse[bool]:
        """Revoke access to an account and its data, transactions included.

        Akahu docs: https://developers.akahu.nz/reference/delete_accounts-id
        """
        return self._client.call(
            "DELETE",
            f"{ACCOUNTS_PATH}/{account_id}",
            SuccessResponse,
            auth=self._client.user_auth(user_access_token),
        )

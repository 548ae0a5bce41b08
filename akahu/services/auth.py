from __future__ import annotations

from typing import Optional

from ..envelope import APIResponse, SuccessResponse
from ..models import AuthorizationURLOptions, ExchangeRequest, ExchangeResponse
from ..utils import path_with_params
from .base import Service

AUTH_PATH = "token"
DEFAULT_RESPONSE_TYPE = "code"
DEFAULT_SCOPE = "ENDURING_CONSENT"


class AuthService(Service):
    def exchange(self, code: str) -> APIResponse[ExchangeResponse]:
        """Exchange an authorization code for a user access token.

        The app id and secret travel in the request body, so no credential
        scheme is attached.

        Akahu docs: https://developers.akahu.nz/reference/post_token
        """
        body = ExchangeRequest(
            code=code,
            redirect_uri=self._client.redirect_uri,
            client_id=self._client.app_id_token,
            client_secret=self._client.app_secret,
        )
        return self._client.call("POST", AUTH_PATH, ExchangeResponse, body=body)

    def revoke_token(self, user_access_token: str) -> APIResponse[bool]:
        """Revoke the user access token used to make the call.

        Akahu docs: https://developers.akahu.nz/reference/delete_token
        """
        return self._client.call(
            "DELETE",
            AUTH_PATH,
            SuccessResponse,
            auth=self._client.user_auth(user_access_token),
        )

    def build_authorization_url(self, options: Optional[AuthorizationURLOptions] = None) -> str:
        """URL of the Akahu authorization page, the first step of the OAuth flow.

        See https://developers.akahu.nz/docs/authorizing-with-oauth2.
        """
        options = options or AuthorizationURLOptions()
        params = {
            "response_type": DEFAULT_RESPONSE_TYPE if options.response_type is None else options.response_type,
            "scope": DEFAULT_SCOPE if options.scope is None else options.scope,
            "client_id": self._client.app_id_token,
            "redirect_uri": self._client.redirect_uri,
        }
        for name in ("email", "connection", "state"):
            value = getattr(options, name)
            if value is not None:
                params[name] = value

        return path_with_params(self._client.oauth_url, params)

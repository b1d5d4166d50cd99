"""Bearer-token client for the dummyjson.com auth endpoints."""

import logging
from typing import Any, Dict, Optional

from playwright.sync_api import APIRequestContext

from ..core.exceptions import ApiRequestError


DEFAULT_BASE_URL = "https://dummyjson.com"


class TokenAuthClient:
    """
    Logs in once and reuses the access token on protected calls.

    Example:
        client = TokenAuthClient(playwright.request.new_context())
        client.login("emilys", "emilyspass")
        client.get_current_user()["username"]  # 'emilys'
    """

    def __init__(
        self,
        request_context: APIRequestContext,
        base_url: str = DEFAULT_BASE_URL,
        logger: Optional[logging.Logger] = None,
    ):
        self.request = request_context
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)
        self._access_token: Optional[str] = None

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._access_token)

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for an access token.

        Raises:
            ApiRequestError: If the service rejects the credentials (400)
        """
        url = f"{self.base_url}/auth/login"
        response = self.request.post(url, data={"username": username, "password": password})
        if response.status != 200:
            raise ApiRequestError(
                f"Login failed for {username}: status {response.status}",
                method="POST",
                url=url,
                status=response.status,
                expected=200,
            )

        data = response.json()
        self._access_token = data.get("accessToken")
        self.logger.info(
            f"Logged in as {username}",
            extra={"metadata": {"username": username, "token_prefix": (self._access_token or "")[:10]}},
        )
        return data

    def auth_headers(self) -> Dict[str, str]:
        """Authorization header for the current token, empty when logged out."""
        if not self._access_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}

    def get_current_user(self) -> Dict[str, Any]:
        """Fetch ``/auth/me`` with the stored token."""
        url = f"{self.base_url}/auth/me"
        response = self.request.get(url, headers=self.auth_headers())
        if response.status != 200:
            raise ApiRequestError(
                f"GET {url} returned {response.status}",
                method="GET",
                url=url,
                status=response.status,
                expected=200,
            )
        return response.json()

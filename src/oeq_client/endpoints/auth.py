"""Session login/logout."""

from typing import Optional
import logging

from pydantic import StrictStr

from oeq_client.base import BaseEndpointClient
from oeq_client.shapes import Shape

logger = logging.getLogger(__name__)

_LOGIN_RESPONSE: Shape[Optional[str]] = Shape(Optional[StrictStr], name="Optional[str]")


class AuthClient(BaseEndpointClient):
    """
    Client for authentication endpoints.

    The server answers a successful login with a session cookie; the HTTP
    client's jar keeps it, so no token handling happens here.
    """

    async def login(self, api_base_path: str, username: str, password: str) -> Optional[str]:
        """
        Log in and establish a session.

        Returns:
            Whatever session identifier the server puts in the body, if any

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        result = await self._post(
            self._build_path(api_base_path, "auth", "login"),
            validator=_LOGIN_RESPONSE,
            query_params={"username": username, "password": password},
        )
        logger.info(f"Logged in as {username}")
        return result

    async def logout(self, api_base_path: str, clear_cookies: bool = False) -> None:
        """
        End the current session.

        Args:
            api_base_path: Base URI to the oEQ institution and API
            clear_cookies: Also drop every cookie held by the client
        """
        await self._put(self._build_path(api_base_path, "auth", "logout"))
        if clear_cookies:
            self._http.clear_cookies()
        logger.info("Logged out")

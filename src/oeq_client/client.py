"""
Main oEQ API client.

This module provides the OeqClient class, the primary entry point for
interacting with the oEQ REST API. It owns one HTTP client, and therefore one
session cookie jar, shared by all of its endpoint clients.
"""

from typing import Any, Dict, Optional
import logging

import httpx

from oeq_client.config import ClientSettings
from oeq_client.endpoints import AuthClient, DrmClient, LegacyContentClient, SearchClient
from oeq_client.http import DEFAULT_USER_AGENT, AsyncHTTPClient

logger = logging.getLogger(__name__)


class OeqClient:
    """
    Main client for the oEQ REST API.

    Example usage:
        ```python
        api = "https://oeq.example.com/inst/api"
        async with OeqClient() as client:
            await client.auth.login(api, "admin", "secret")
            user = await client.content.current_user_details(api)
            terms = await client.drm.list_terms(api, item_uuid, 1)
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        verify: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the oEQ client.

        Args:
            base_url: Base URL relative paths resolve against (optional)
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            user_agent: User-Agent header value
            follow_redirects: Whether to follow HTTP redirects
            verify: Whether to verify TLS certificates
            transport: Custom httpx transport (mainly for testing)
        """
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
            verify=verify,
            transport=transport,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OeqClient":
        """Build a client from ClientSettings (read from the environment by default)."""
        settings = settings or ClientSettings()
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
            verify=settings.verify_ssl,
            transport=transport,
        )

    @property
    def base_url(self) -> Optional[str]:
        """Get the base URL, if any."""
        return self._http.base_url

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    @property
    def cookies(self) -> httpx.Cookies:
        """The session cookie jar."""
        return self._http.cookies

    def _get_endpoint_client(self, name: str, client_class: type) -> Any:
        if name not in self._endpoint_clients:
            self._endpoint_clients[name] = client_class(self._http)
        return self._endpoint_clients[name]

    @property
    def auth(self) -> AuthClient:
        return self._get_endpoint_client("auth", AuthClient)

    @property
    def content(self) -> LegacyContentClient:
        return self._get_endpoint_client("content", LegacyContentClient)

    @property
    def drm(self) -> DrmClient:
        return self._get_endpoint_client("drm", DrmClient)

    @property
    def search(self) -> SearchClient:
        return self._get_endpoint_client("search", SearchClient)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        logger.debug("Client closed")

    async def __aenter__(self) -> "OeqClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"OeqClient(base_url={self.base_url!r})"

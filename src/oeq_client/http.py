"""
Async HTTP client for the oEQ REST API.

This module provides the request executor built on httpx:
- One cookie jar per client instance, so a session established by one call
  (e.g. login) is carried by every later call
- Deterministic, insertion-ordered query string encoding
- JSON request bodies for PUT/POST
- Translation of every transport failure into the client error taxonomy

There is no retry logic: a failed call fails once.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field

from oeq_client.exceptions import normalize_error

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "oeq-client"


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"


class RequestDescriptor(BaseModel):
    """Everything needed to issue one request."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1, description="Absolute URL, or path relative to the client base_url")
    method: HttpMethod = HttpMethod.GET
    query_params: Optional[Dict[str, Any]] = Field(None, description="Scalar or list values, sent in insertion order")
    body: Any = Field(None, description="JSON serializable body for PUT/POST")


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def build_query_params(params: Optional[Mapping[str, Any]]) -> httpx.QueryParams:
    """
    Flatten a parameter mapping into ordered query pairs.

    Keys keep their insertion order. A list or tuple value yields one pair per
    element, in element order. ``None`` values are dropped.
    """
    pairs: List[Tuple[str, Any]] = []
    for key, value in (params or {}).items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            pairs.append((key, _query_value(item)))
    return httpx.QueryParams(pairs)


def encode_query_params(params: Optional[Mapping[str, Any]]) -> str:
    """Encode parameters into a query string (without the leading ``?``)."""
    return str(build_query_params(params))


def _decode_body(response: httpx.Response) -> Any:
    """Decoded JSON, None for an empty body, or the raw text when not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class AsyncHTTPClient:
    """
    Async HTTP client for oEQ API requests.

    This client handles:
    - Optional base URL management (absolute URLs are used as-is)
    - The session cookie jar, shared by every call made through this instance
    - Response decoding and error normalization

    The cookie jar survives ``close()``: reopening the client continues the
    same session. Separate instances never share cookies.
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
        Initialize the HTTP client.

        Args:
            base_url: Base URL that relative paths are resolved against
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            user_agent: User-Agent header value
            follow_redirects: Whether to follow HTTP redirects
            verify: Whether to verify TLS certificates
            transport: Custom httpx transport (mainly for testing)
        """
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self.verify = verify
        self.transport = transport
        self._default_headers = headers or {}
        self._cookies = httpx.Cookies()
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def cookies(self) -> httpx.Cookies:
        """The session cookie jar."""
        return self._cookies

    def clear_cookies(self) -> None:
        """Forget the current session."""
        self._cookies.clear()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            kwargs: Dict[str, Any] = {
                "timeout": httpx.Timeout(self.timeout),
                "follow_redirects": self.follow_redirects,
                "headers": self._build_headers(),
                "cookies": self._cookies,
                "verify": self.verify,
            }
            if self.base_url:
                kwargs["base_url"] = self.base_url
            if self.transport is not None:
                kwargs["transport"] = self.transport
            self._client = httpx.AsyncClient(**kwargs)
            # httpx copies the jar it is given; keep pointing at the live one
            self._cookies = self._client.cookies
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client, keeping the session cookies."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self) -> Dict[str, str]:
        """Build default request headers."""
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        headers.update(self._default_headers)
        return headers

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """
        Issue a request and return the decoded response body.

        Args:
            descriptor: What to request

        Returns:
            Parsed JSON, ``None`` for an empty body, or the body text when it
            is not JSON

        Raises:
            NetworkError: When no response was received
            HttpError: When the server answered with a non-2xx status
        """
        client = await self._get_client()
        method = descriptor.method.value
        params = build_query_params(descriptor.query_params)
        json_body = descriptor.body if descriptor.method is not HttpMethod.GET else None
        if isinstance(json_body, BaseModel):
            json_body = json_body.model_dump(mode="json", by_alias=True, exclude_none=True)

        logger.debug(f"{method} {descriptor.path}")
        try:
            response = await client.request(
                method,
                descriptor.path,
                params=params if params else None,
                json=json_body,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            error = normalize_error(e)
            logger.warning(f"{method} {descriptor.path} failed: {error}")
            raise error from e

        return _decode_body(response)

    async def get(
        self,
        path: str,
        *,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return await self.execute(
            RequestDescriptor(path=path, method=HttpMethod.GET, query_params=query_params)
        )

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a PUT request."""
        return await self.execute(
            RequestDescriptor(path=path, method=HttpMethod.PUT, query_params=query_params, body=body)
        )

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a POST request."""
        return await self.execute(
            RequestDescriptor(path=path, method=HttpMethod.POST, query_params=query_params, body=body)
        )

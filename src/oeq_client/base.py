"""
Base class for resource endpoint clients.

Endpoint clients only build a path and declare the expected shape. The
pipeline in pipeline.py does the rest.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from oeq_client.http import AsyncHTTPClient, HttpMethod, RequestDescriptor
from oeq_client.pipeline import typed_request
from oeq_client.shapes import Transformer, Validator


class BaseEndpointClient:
    """
    Common plumbing for endpoint clients.

    Every method takes the ``api_base_path`` of the oEQ institution
    (e.g. ``"https://oeq.example.com/inst/api"``) so one client can talk to
    several institutions while sharing the session jar of its HTTP client.
    """

    def __init__(self, http_client: AsyncHTTPClient):
        """
        Initialize the endpoint client.

        Args:
            http_client: The underlying HTTP client
        """
        self._http = http_client

    @staticmethod
    def _build_path(api_base_path: str, *parts: Any) -> str:
        """Join the API base path with URL-quoted path segments."""
        base = api_base_path.rstrip("/")
        segments = [quote(str(p).strip("/"), safe="") for p in parts if p is not None]
        segments = [s for s in segments if s]
        if segments:
            return f"{base}/{'/'.join(segments)}"
        return base

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        validator: Optional[Validator] = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        transformer: Optional[Transformer[Any]] = None,
    ) -> Any:
        descriptor = RequestDescriptor(
            path=path,
            method=method,
            query_params=query_params,
            body=body,
        )
        return await typed_request(self._http, descriptor, validator, transformer)

    async def _get(
        self,
        path: str,
        validator: Optional[Validator] = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
        transformer: Optional[Transformer[Any]] = None,
    ) -> Any:
        return await self._request(
            HttpMethod.GET,
            path,
            validator,
            query_params=query_params,
            transformer=transformer,
        )

    async def _put(
        self,
        path: str,
        body: Any = None,
        validator: Optional[Validator] = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._request(
            HttpMethod.PUT,
            path,
            validator,
            query_params=query_params,
            body=body,
        )

    async def _post(
        self,
        path: str,
        body: Any = None,
        validator: Optional[Validator] = None,
        *,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._request(
            HttpMethod.POST,
            path,
            validator,
            query_params=query_params,
            body=body,
        )

"""
oEQ Client Library.

A type-safe async HTTP client for the openEQUELLA REST API.

Example usage:
    ```python
    from oeq_client import OeqClient

    api = "https://oeq.example.com/inst/api"
    async with OeqClient() as client:
        await client.auth.login(api, "admin", "secret")
        terms = await client.drm.list_terms(api, item_uuid, 1)
    ```

Every failure is raised as an OeqClientError whose ``kind`` is one of
NETWORK_FAILURE, HTTP_ERROR or SHAPE_MISMATCH.
"""

__version__ = "0.1.0"

# Main client
from oeq_client.client import OeqClient
from oeq_client.config import ClientSettings

# Request layer (for custom requests)
from oeq_client.http import (
    AsyncHTTPClient,
    HttpMethod,
    RequestDescriptor,
    build_query_params,
    encode_query_params,
)
from oeq_client.pipeline import typed_request
from oeq_client.shapes import Shape, Transformer, Validator, is_paged_base_entity

# Base classes (for building custom clients)
from oeq_client.base import BaseEndpointClient
from oeq_client.endpoints import AuthClient, DrmClient, LegacyContentClient, SearchClient

# Exceptions
from oeq_client.exceptions import (
    ErrorKind,
    OeqClientError,
    # Network errors
    NetworkError,
    TimeoutError,
    ConnectionError,
    # HTTP errors
    HttpError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    ServerError,
    ServiceUnavailableError,
    # Shape errors
    ShapeMismatchError,
    # Utility
    normalize_error,
    error_from_response,
    exception_from_status,
)

__all__ = [
    "__version__",
    "OeqClient",
    "ClientSettings",
    "AsyncHTTPClient",
    "HttpMethod",
    "RequestDescriptor",
    "build_query_params",
    "encode_query_params",
    "typed_request",
    "Shape",
    "Transformer",
    "Validator",
    "is_paged_base_entity",
    "BaseEndpointClient",
    "AuthClient",
    "DrmClient",
    "LegacyContentClient",
    "SearchClient",
    "ErrorKind",
    "OeqClientError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "HttpError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "ServiceUnavailableError",
    "ShapeMismatchError",
    "normalize_error",
    "error_from_response",
    "exception_from_status",
]

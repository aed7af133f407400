"""Resource endpoint clients."""

from oeq_client.endpoints.auth import AuthClient
from oeq_client.endpoints.content import LegacyContentClient
from oeq_client.endpoints.drm import DrmClient
from oeq_client.endpoints.search import SearchClient

__all__ = [
    "AuthClient",
    "DrmClient",
    "LegacyContentClient",
    "SearchClient",
]

"""DRM terms of items."""

from pydantic import StrictInt

from oeq_client.base import BaseEndpointClient
from oeq_client.shapes import Shape

from oeq_types.drm import ItemDrmDetails

_ITEM_DRM_DETAILS: Shape[ItemDrmDetails] = Shape(ItemDrmDetails)
_ACCEPTANCE_ID: Shape[int] = Shape(StrictInt, name="int")


class DrmClient(BaseEndpointClient):
    """
    Client for item DRM endpoints.
    """

    def _drm_path(self, api_base_path: str, uuid: str, version: int) -> str:
        return self._build_path(api_base_path, "item", uuid, version, "drm")

    async def list_terms(self, api_base_path: str, uuid: str, version: int) -> ItemDrmDetails:
        """
        List all of an item's DRM terms.

        Args:
            api_base_path: Base URI to the oEQ institution and API
            uuid: UUID of the item
            version: Version of the item
        """
        return await self._get(self._drm_path(api_base_path, uuid, version), _ITEM_DRM_DETAILS)

    async def accept_terms(self, api_base_path: str, uuid: str, version: int) -> int:
        """Accept an item's DRM terms, returning the ID of the acceptance record."""
        return await self._post(self._drm_path(api_base_path, uuid, version), validator=_ACCEPTANCE_ID)

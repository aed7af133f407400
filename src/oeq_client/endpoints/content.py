"""Legacy content API: details of the session user."""

from oeq_client.base import BaseEndpointClient
from oeq_client.shapes import Shape

from oeq_types.content import CurrentUserDetails

_CURRENT_USER_DETAILS: Shape[CurrentUserDetails] = Shape(CurrentUserDetails)


class LegacyContentClient(BaseEndpointClient):
    """
    Client for legacy content endpoints.
    """

    async def current_user_details(self, api_base_path: str) -> CurrentUserDetails:
        """
        Retrieve details of the current user (based on the session cookie),
        including the UI menu structure and task/notification counts.
        """
        return await self._get(
            self._build_path(api_base_path, "content", "currentuser"),
            _CURRENT_USER_DETAILS,
        )

from typing import List, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from oeq_types.common import OeqModel


class ItemCounts(OeqModel):
    tasks: StrictInt
    notifications: StrictInt


class MenuItem(OeqModel):
    title: StrictStr
    href: Optional[StrictStr] = None
    system_icon: Optional[StrictStr] = None
    route: Optional[StrictStr] = None
    icon_url: Optional[StrictStr] = None
    new_window: StrictBool


class CurrentUserDetails(OeqModel):
    """The user bound to the current session, plus menu and task counts for the UI."""

    id: StrictStr = Field(description="User unique identifier")
    username: StrictStr
    first_name: StrictStr
    last_name: StrictStr
    email_address: Optional[StrictStr] = None
    accessibility_mode: StrictBool
    auto_logged_in: StrictBool
    guest: StrictBool
    prefs_editable: StrictBool
    menu_groups: List[List[MenuItem]]
    counts: Optional[ItemCounts] = None

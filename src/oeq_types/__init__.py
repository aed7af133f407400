"""oEQ Types - Pydantic shapes for openEQUELLA REST API payloads."""

__version__ = "0.1.0"

from .common import (
    OeqModel,
    User,
    EntityLock,
    BaseEntityExport,
    BaseEntityReadOnly,
    BaseEntitySecurity,
    TargetListEntry,
    BaseEntity,
    ItemStatus,
    PagedResult,
)
from .drm import (
    DrmParties,
    DrmCustomTerms,
    DrmAgreements,
    ItemDrmDetails,
)
from .content import (
    ItemCounts,
    MenuItem,
    CurrentUserDetails,
)
from .search import (
    SortOrder,
    SearchParams,
    Attachment,
    DisplayField,
    SearchResultItem,
    SearchResult,
)

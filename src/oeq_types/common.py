from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class OeqModel(BaseModel):
    """
    Base for all shapes returned by the oEQ REST API.

    The server speaks camelCase; attributes are snake_case and both spellings
    are accepted on input. Unknown keys are kept rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class User(OeqModel):
    id: StrictStr = Field(description="User unique identifier")
    username: Optional[StrictStr] = None
    first_name: Optional[StrictStr] = None
    last_name: Optional[StrictStr] = None
    email_address: Optional[StrictStr] = None


class EntityLock(OeqModel):
    uuid: StrictStr
    owner: User
    links: Dict[str, StrictStr]


class BaseEntityExport(OeqModel):
    export_version: StrictStr
    lock: EntityLock


class BaseEntityReadOnly(OeqModel):
    granted: List[StrictStr]


class TargetListEntry(OeqModel):
    granted: StrictBool
    override: StrictBool
    privilege: StrictStr
    who: StrictStr


class BaseEntitySecurity(OeqModel):
    rules: List[TargetListEntry]


class BaseEntity(OeqModel):
    """A named, owned, versionable server-side resource identified by a UUID."""

    uuid: StrictStr = Field(description="Entity UUID")
    modified_date: Optional[StrictStr] = Field(None, description="ISO-8601 timestamp")
    created_date: Optional[StrictStr] = Field(None, description="ISO-8601 timestamp")
    owner: Optional[User] = None
    name: StrictStr = Field(description="Display name in the current locale")
    name_strings: Dict[str, StrictStr] = Field(description="Display name per locale")
    description: Optional[StrictStr] = None
    description_strings: Optional[Dict[str, StrictStr]] = None
    security: Optional[BaseEntitySecurity] = None
    export_details: Optional[BaseEntityExport] = None
    readonly: Optional[BaseEntityReadOnly] = None
    links: Dict[str, StrictStr]


class ItemStatus(str, Enum):
    DRAFT = "DRAFT"
    LIVE = "LIVE"
    REJECTED = "REJECTED"
    MODERATING = "MODERATING"
    ARCHIVED = "ARCHIVED"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"
    REVIEW = "REVIEW"
    PERSONAL = "PERSONAL"


class PagedResult(OeqModel, Generic[T]):
    """
    One page of a paginated listing.

    A well-behaved server returns ``len(results) == length`` and
    ``available >= length``. A resumption token means more pages exist.
    """

    start: StrictInt
    length: StrictInt
    available: StrictInt
    results: List[T]
    resumption_token: Optional[StrictStr] = None

    @property
    def has_more(self) -> bool:
        return self.resumption_token is not None

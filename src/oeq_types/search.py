from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from oeq_types.common import ItemStatus, OeqModel, PagedResult


class SortOrder(str, Enum):
    RANK = "rank"
    DATEMODIFIED = "datemodified"
    DATECREATED = "datecreated"
    NAME = "name"
    RATING = "rating"


class SearchParams(OeqModel):
    """Query parameters understood by the search2 endpoint."""

    query: Optional[str] = Field(None, description="Free text query")
    start: Optional[int] = Field(None, ge=0, description="Index of the first result")
    length: Optional[int] = Field(None, ge=0, description="Maximum number of results")
    status: Optional[List[ItemStatus]] = Field(None, description="Restrict to item statuses")
    collections: Optional[List[str]] = Field(None, description="Restrict to collection UUIDs")
    owner: Optional[str] = Field(None, description="Restrict to an owner's user ID")
    order: Optional[SortOrder] = None
    reverse_order: Optional[bool] = None
    modified_after: Optional[date] = None
    modified_before: Optional[date] = None
    where_clause: Optional[str] = None
    search_attachments: Optional[bool] = Field(None, description="Also match text inside attachments")

    def to_query_params(self) -> Dict[str, Any]:
        """Wire names in declaration order, unset values dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Attachment(OeqModel):
    attachment_type: StrictStr
    id: StrictStr
    description: Optional[StrictStr] = None
    preview: StrictBool
    links: Dict[str, StrictStr]


class DisplayField(OeqModel):
    type: StrictStr
    name: StrictStr
    html: StrictStr


class SearchResultItem(OeqModel):
    uuid: StrictStr
    version: StrictInt
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    status: ItemStatus
    created_date: datetime
    modified_date: datetime
    collection_id: StrictStr
    comment_count: Optional[StrictInt] = None
    attachments: Optional[List[Attachment]] = None
    thumbnail: Optional[StrictStr] = None
    display_fields: List[DisplayField] = Field(default_factory=list)
    keyword_found_in_attachment: StrictBool = False
    links: Dict[str, StrictStr] = Field(default_factory=dict)


class SearchResult(PagedResult[SearchResultItem]):
    highlight: List[StrictStr] = Field(default_factory=list)

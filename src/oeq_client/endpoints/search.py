"""Item search (search2)."""

from datetime import datetime
from typing import Any, Optional

from pydantic import TypeAdapter

from oeq_client.base import BaseEndpointClient
from oeq_client.shapes import Shape

from oeq_types.search import SearchParams, SearchResult

_SEARCH_RESULT: Shape[SearchResult] = Shape(SearchResult)
_DATETIME = TypeAdapter(datetime)
_DATE_FIELDS = ("createdDate", "modifiedDate")


def parse_result_dates(data: Any) -> Any:
    """
    Return a copy of a search payload with result dates parsed to datetimes.

    The input is left untouched. Payloads that are not a page of results are
    returned as-is for the validator to reject.
    """
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        return data

    results = []
    for item in data["results"]:
        if isinstance(item, dict):
            item = dict(item)
            for key in _DATE_FIELDS:
                if isinstance(item.get(key), str):
                    item[key] = _DATETIME.validate_python(item[key])
        results.append(item)
    return {**data, "results": results}


class SearchClient(BaseEndpointClient):
    """
    Client for the search2 endpoint.
    """

    async def search(
        self,
        api_base_path: str,
        params: Optional[SearchParams] = None,
    ) -> SearchResult:
        """
        Search for items.

        Args:
            api_base_path: Base URI to the oEQ institution and API
            params: Query, filters, ordering and paging

        Returns:
            One page of results; ``has_more`` tells whether another page exists
        """
        query_params = params.to_query_params() if params else None
        return await self._get(
            self._build_path(api_base_path, "search2"),
            _SEARCH_RESULT,
            query_params=query_params,
            transformer=parse_result_dates,
        )

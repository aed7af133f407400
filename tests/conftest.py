"""Pytest configuration and fixtures for oeq-client tests."""

from typing import Any, Callable, Dict

import httpx
import pytest

from oeq_client.http import AsyncHTTPClient


API_BASE_PATH = "https://oeq.example.com/inst/api"
ITEM_UUID = "9b9bf5a9-c5af-490b-88fe-7e330679fad2"


# ============================================================================
# Helpers
# ============================================================================


def mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> AsyncHTTPClient:
    """Create an AsyncHTTPClient whose requests are answered by ``handler``."""
    return AsyncHTTPClient(transport=httpx.MockTransport(handler))


# ============================================================================
# Payload Fixtures
# ============================================================================


@pytest.fixture
def api_base_path():
    """Base URI of the test institution's API."""
    return API_BASE_PATH


@pytest.fixture
def drm_details_data() -> Dict[str, Any]:
    """DRM terms as returned by the server."""
    return {
        "title": "Copyright notice",
        "subtitle": "Please read the terms below",
        "description": "You must accept these terms to use this item.",
        "agreements": {
            "regularPermission": "You may view and print this item.",
            "educationSector": "Use is limited to the education sector.",
            "parties": {
                "title": "Parties",
                "partyList": ["Alice Example - alice@example.com"],
            },
            "customTerms": {
                "title": "Additional terms",
                "terms": "Do not redistribute.",
            },
        },
    }


def _base_entity(uuid: str, name: str) -> Dict[str, Any]:
    return {
        "uuid": uuid,
        "modifiedDate": "2020-05-05T10:00:00.000+10:00",
        "createdDate": "2019-01-01T09:30:00.000+10:00",
        "owner": {"id": "admin-id", "username": "admin"},
        "name": name,
        "nameStrings": {"en": name},
        "links": {"self": f"{API_BASE_PATH}/collection/{uuid}"},
    }


@pytest.fixture
def paged_base_entity_data() -> Dict[str, Any]:
    """A page of two BaseEntity results out of ten available."""
    return {
        "start": 0,
        "length": 2,
        "available": 10,
        "results": [
            _base_entity("c1b1f9f0-0000-4000-8000-000000000001", "Collection one"),
            _base_entity("c1b1f9f0-0000-4000-8000-000000000002", "Collection two"),
        ],
        "resumptionToken": "2:10",
    }


@pytest.fixture
def current_user_data() -> Dict[str, Any]:
    """Current user details as returned by the server."""
    return {
        "id": "f9ec8b09-cf64-44ff-8a0a-08a8f2f9272a",
        "username": "autotest",
        "firstName": "Auto",
        "lastName": "Test",
        "emailAddress": "autotest@example.com",
        "accessibilityMode": False,
        "autoLoggedIn": False,
        "guest": False,
        "prefsEditable": True,
        "menuGroups": [
            [
                {"title": "Dashboard", "route": "/home", "systemIcon": "home", "newWindow": False},
                {"title": "Help", "href": "https://example.com/help", "newWindow": True},
            ]
        ],
        "counts": {"tasks": 3, "notifications": 7},
    }


@pytest.fixture
def search_result_data() -> Dict[str, Any]:
    """One page of search2 results."""
    return {
        "start": 0,
        "length": 1,
        "available": 1,
        "results": [
            {
                "uuid": ITEM_UUID,
                "version": 1,
                "name": "ActivationApiTest - Book Holding Clone",
                "status": "LIVE",
                "createdDate": "2014-04-02T13:12:33.000+10:00",
                "modifiedDate": "2014-04-10T08:00:00.000+10:00",
                "collectionId": "4c147089-cddb-e67c-b5ab-189614eb1463",
                "displayFields": [],
                "keywordFoundInAttachment": False,
                "links": {"view": f"https://oeq.example.com/inst/items/{ITEM_UUID}/1/"},
            }
        ],
        "highlight": ["Book", "Holding"],
    }


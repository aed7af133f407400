"""Tests for exception classes and error normalization."""

import pytest
import httpx

from oeq_client.exceptions import (
    ErrorKind,
    OeqClientError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    HttpError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    ServerError,
    ServiceUnavailableError,
    ShapeMismatchError,
    error_from_response,
    exception_from_status,
    normalize_error,
)


def _response(status_code: int, **kwargs) -> httpx.Response:
    request = httpx.Request("GET", "https://oeq.example.com/inst/api/thing")
    return httpx.Response(status_code, request=request, **kwargs)


class TestErrorKinds:
    """Every error belongs to exactly one of the three kinds."""

    def test_network_errors(self):
        for error in (NetworkError(), TimeoutError(), ConnectionError()):
            assert error.kind is ErrorKind.NETWORK_FAILURE
            assert error.status_code is None

    def test_http_errors(self):
        error = NotFoundError("Item not found", status_code=404)
        assert error.kind is ErrorKind.HTTP_ERROR
        assert isinstance(error, HttpError)
        assert error.status_code == 404

    def test_shape_mismatch(self):
        error = ShapeMismatchError()
        assert error.kind is ErrorKind.SHAPE_MISMATCH
        assert error.message == "Data format mismatch with data received from server."

    def test_str_includes_status(self):
        error = HttpError("Forbidden", status_code=403)
        assert str(error) == "Forbidden (HTTP 403)"
        assert str(NetworkError("boom")) == "boom"

    def test_repr(self):
        repr_str = repr(BadRequestError("Invalid date", status_code=400))
        assert "BadRequestError" in repr_str
        assert "http_error" in repr_str
        assert "400" in repr_str

    def test_all_derive_from_base(self):
        assert issubclass(ShapeMismatchError, OeqClientError)
        assert issubclass(TimeoutError, NetworkError)
        assert issubclass(ServiceUnavailableError, ServerError)


class TestExceptionFromStatus:
    """Tests for status code to exception mapping."""

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (409, ConflictError),
            (500, ServerError),
            (503, ServiceUnavailableError),
            (507, ServerError),
            (418, HttpError),
        ],
    )
    def test_mapping(self, status_code, expected):
        error = exception_from_status(status_code, "message")
        assert type(error) is expected
        assert error.status_code == status_code


class TestErrorFromResponse:
    """Tests for extracting the server message from an error response."""

    def test_uses_error_description(self):
        response = _response(
            404,
            json={"code": 404, "error": "Not Found", "error_description": "No item with that UUID"},
        )
        error = error_from_response(response)
        assert isinstance(error, NotFoundError)
        assert error.message == "No item with that UUID"
        assert error.details["code"] == 404

    def test_uses_message_key(self):
        error = error_from_response(_response(400, json={"message": "Invalid date format"}))
        assert error.message == "Invalid date format"

    def test_uses_plain_text_body(self):
        error = error_from_response(_response(500, text="Something broke"))
        assert error.message == "Something broke"
        assert error.details == {}

    def test_falls_back_to_status_text(self):
        error = error_from_response(_response(403))
        assert error.message == "Forbidden"
        assert error.status_code == 403

    def test_falls_back_when_json_has_no_message(self):
        error = error_from_response(_response(404, json={"code": 404}))
        assert error.message == "Not Found"


class TestNormalizeError:
    """Tests for normalize_error."""

    def test_passthrough(self):
        original = ShapeMismatchError("bad")
        assert normalize_error(original) is original

    def test_status_error(self):
        response = _response(401, json={"error_description": "Session expired"})
        exc = httpx.HTTPStatusError("401", request=response.request, response=response)
        error = normalize_error(exc)
        assert isinstance(error, AuthenticationError)
        assert error.message == "Session expired"

    def test_timeout(self):
        request = httpx.Request("GET", "https://oeq.example.com")
        error = normalize_error(httpx.ReadTimeout("too slow", request=request))
        assert isinstance(error, TimeoutError)
        assert error.kind is ErrorKind.NETWORK_FAILURE

    def test_connect_error(self):
        request = httpx.Request("GET", "https://oeq.example.com")
        error = normalize_error(httpx.ConnectError("refused", request=request))
        assert isinstance(error, ConnectionError)

    def test_other_transport_error(self):
        request = httpx.Request("GET", "https://oeq.example.com")
        error = normalize_error(httpx.RemoteProtocolError("garbage", request=request))
        assert type(error) is NetworkError
        assert "garbage" in error.message

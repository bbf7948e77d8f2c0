"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from aoe4world.core.exceptions import (
    AoE4WorldError,
    DecodeError,
    FetchError,
    RateLimitError,
    RemoteError,
    TransportError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and attributes."""

    @pytest.mark.parametrize(
        "exc_cls", [TransportError, RemoteError, RateLimitError, DecodeError]
    )
    def test_fetch_errors(self, exc_cls):
        assert issubclass(exc_cls, FetchError)
        assert issubclass(exc_cls, AoE4WorldError)

    def test_validation_error_is_not_fetch_error(self):
        assert issubclass(ValidationError, AoE4WorldError)
        assert not issubclass(ValidationError, FetchError)

    def test_validation_error_field(self):
        error = ValidationError("missing profile_id", field="profile_id")
        assert error.field == "profile_id"
        assert str(error) == "missing profile_id"

    def test_fetch_error_page(self):
        assert FetchError("x").page is None
        assert DecodeError("x", page=3).page == 3

    def test_remote_error(self):
        error = RemoteError("HTTP 500", status_code=500, body="oops", page=2)
        assert error.status_code == 500
        assert error.body == "oops"
        assert error.page == 2

    def test_rate_limit_error(self):
        error = RateLimitError("slow down", retry_after=12.5)
        assert isinstance(error, RemoteError)
        assert error.status_code == 429
        assert error.retry_after == 12.5

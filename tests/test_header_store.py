"""Tests for reading the published header bag."""

import json

import pytest
from pydantic import ValidationError

from pgrst_headers.adapters.request_context import RequestContext
from pgrst_headers.application.services.header_store import (
    get_headers,
    get_headers_or_empty,
    parse_header_payload,
)
from pgrst_headers.domain.errors import (
    HeaderIntrospectionError,
    MalformedHeaderPayload,
    UnavailableContext,
)
from pgrst_headers.domain.models import HeaderBag


def _context(raw: str, setting_name: str = "request.headers") -> RequestContext:
    return RequestContext(settings={setting_name: raw})


def test_get_headers_parses_published_payload() -> None:
    """Given a published JSON object, when reading headers, then a HeaderBag is returned."""
    context = _context(json.dumps({"host": "localhost:3000", "user-agent": "curl/8.0"}))

    bag = get_headers(context)

    assert bag == HeaderBag({"host": "localhost:3000", "user-agent": "curl/8.0"})


def test_get_headers_keeps_null_values_as_absent() -> None:
    """Given a header published as null, when reading headers, then its value is None."""
    bag = get_headers(_context('{"x-null": null, "x-empty": ""}'))

    assert bag["x-null"] is None
    assert bag["x-empty"] == ""


def test_get_headers_reads_custom_setting_name() -> None:
    """Given headers under a custom setting, when reading with that name, then they are found."""
    context = _context('{"host": "api.example.com"}', setting_name="app.request_headers")

    bag = get_headers(context, "app.request_headers")

    assert bag["host"] == "api.example.com"


class TestUnavailableContext:
    """Tests for reading headers outside a request."""

    def test_when_setting_missing_then_raises_unavailable_context(self) -> None:
        """Given no published setting, when reading headers, then UnavailableContext is raised."""
        with pytest.raises(UnavailableContext) as exc_info:
            get_headers(RequestContext.none())

        assert exc_info.value.setting_name == "request.headers"
        assert isinstance(exc_info.value, HeaderIntrospectionError)

    def test_when_setting_empty_then_raises_unavailable_context(self) -> None:
        """Given a reset (empty) setting, when reading headers, then UnavailableContext is raised."""
        with pytest.raises(UnavailableContext):
            get_headers(_context(""))

    def test_when_setting_missing_then_or_empty_returns_empty_bag(self) -> None:
        """Given no published setting, when reading with or_empty, then the empty bag is returned."""
        bag = get_headers_or_empty(RequestContext.none())

        assert bag == HeaderBag.empty()


class TestMalformedPayload:
    """Tests for corrupt published payloads."""

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "{",
            '["host", "localhost"]',
            '"localhost"',
            '{"content-length": 42}',
            '{"host": {"name": "localhost"}}',
            '{"accept": ["a", "b"]}',
        ],
    )
    def test_when_payload_is_not_flat_string_object_then_raises(self, raw: str) -> None:
        """Given a malformed payload, when reading headers, then MalformedHeaderPayload is raised."""
        with pytest.raises(MalformedHeaderPayload) as exc_info:
            get_headers(_context(raw))

        assert exc_info.value.setting_name == "request.headers"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_when_payload_is_malformed_then_or_empty_still_raises(self) -> None:
        """Given a malformed payload, when reading with or_empty, then the error propagates."""
        with pytest.raises(MalformedHeaderPayload):
            get_headers_or_empty(_context("not json"))

    def test_when_payload_is_malformed_then_warning_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given a malformed payload, when parsing, then a warning names the setting."""
        with pytest.raises(MalformedHeaderPayload):
            parse_header_payload("not json", "request.headers")

        assert "request.headers" in caplog.text
        assert any(record.levelname == "WARNING" for record in caplog.records)


def test_get_headers_does_not_share_bags_between_requests() -> None:
    """Given two request contexts, when reading each, then each sees only its own headers."""
    first = RequestContext.with_headers({"X-Forwarded-For": "1.1.1.1"})
    second = RequestContext.with_headers({"X-Forwarded-For": "2.2.2.2"})

    assert get_headers(first)["x-forwarded-for"] == "1.1.1.1"
    assert get_headers(second)["x-forwarded-for"] == "2.2.2.2"
    assert get_headers(first)["x-forwarded-for"] == "1.1.1.1"

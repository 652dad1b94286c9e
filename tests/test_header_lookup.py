"""Tests for single-header lookups."""

import pytest

from pgrst_headers.application.services.header_lookup import get_header, has_header
from pgrst_headers.domain.models import HeaderBag


@pytest.fixture
def bag() -> HeaderBag:
    return HeaderBag(
        {
            "host": "localhost:3000",
            "x-empty": "",
            "x-null": None,
        }
    )


@pytest.mark.parametrize("name", ["host", "Host", "HOST", "hOsT"])
def test_get_header_is_case_insensitive(bag: HeaderBag, name: str) -> None:
    """Given any casing of a header name, when looking it up, then the same value is returned."""
    assert get_header(bag, name) == get_header(bag, "host") == "localhost:3000"


def test_get_header_returns_none_for_missing_header(bag: HeaderBag) -> None:
    """Given a header that was not published, when looking it up, then None is returned."""
    assert get_header(bag, "origin") is None


def test_get_header_distinguishes_empty_from_missing(bag: HeaderBag) -> None:
    """Given an explicitly empty header, when looking it up, then an empty string is returned."""
    assert get_header(bag, "x-empty") == ""
    assert get_header(bag, "x-empty") is not None


def test_get_header_returns_plain_text_not_json(bag: HeaderBag) -> None:
    """Given a published string, when looking it up, then no JSON quoting is present."""
    assert get_header(bag, "host") == "localhost:3000"
    assert get_header(bag, "host") != '"localhost:3000"'


def test_has_header(bag: HeaderBag) -> None:
    """Given published and missing headers, when checking presence, then only published count."""
    assert has_header(bag, "X-Empty") is True
    assert has_header(bag, "x-null") is True
    assert has_header(bag, "origin") is False


def test_get_header_is_idempotent(bag: HeaderBag) -> None:
    """Given the same bag, when looking up repeatedly, then results are identical."""
    results = {get_header(bag, "host") for _ in range(5)}

    assert results == {"localhost:3000"}

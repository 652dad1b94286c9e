"""Boolean predicates for access-control rules.

All predicates deny by default: comparing against a missing header is False.
"""

import logging
import re
from collections.abc import Collection

from pgrst_headers.application.services.header_lookup import get_header
from pgrst_headers.domain.models.header_bag import HeaderBag

logger = logging.getLogger(__name__)

_VERSION_PATTERN = re.compile(r"^v?(\d+(?:\.\d+)*)$")


def in_whitelist(ip: str | None, whitelist: Collection[str]) -> bool:
    """Exact string membership of an address in a whitelist.

    No CIDR or subnet matching: "10.0.0.1" does not match "10.0.0.0/8".
    """
    if ip is None:
        return False
    return ip in whitelist


def header_equals(bag: HeaderBag, name: str, expected: str) -> bool:
    """Case-sensitive exact comparison of a header value."""
    value = get_header(bag, name)
    if value is None:
        return False
    return value == expected


def host_equals(bag: HeaderBag, expected: str) -> bool:
    """Compare the Host header, e.g. ``localhost:3000``."""
    return header_equals(bag, "host", expected)


def origin_equals(bag: HeaderBag, expected: str) -> bool:
    """Compare the Origin header, e.g. ``https://app.example.com``."""
    return header_equals(bag, "origin", expected)


def parse_version(value: str) -> tuple[int, ...]:
    """Parse a dotted numeric version such as ``2.10.1`` or ``v3.1``.

    Raises:
        ValueError: If the value is not a dotted numeric version.
    """
    match = _VERSION_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Not a dotted numeric version: {value!r}")
    return tuple(int(part) for part in match.group(1).split("."))


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as version a is lower than, equal to or higher than b.

    Missing trailing components count as zero, so ``1.2`` equals ``1.2.0``.
    """
    left = parse_version(a)
    right = parse_version(b)
    width = max(len(left), len(right))
    left += (0,) * (width - len(left))
    right += (0,) * (width - len(right))
    return (left > right) - (left < right)


def version_at_least(bag: HeaderBag, name: str, minimum: str) -> bool:
    """Check that a version header is at least ``minimum``.

    A missing or unparsable header value is False.
    """
    value = get_header(bag, name)
    if value is None:
        return False
    try:
        return compare_versions(value, minimum) >= 0
    except ValueError:
        logger.debug(f"Ignoring unparsable version in header '{name}'")
        return False

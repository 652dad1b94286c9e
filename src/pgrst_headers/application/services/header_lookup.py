"""Single-header lookups."""

from pgrst_headers.domain.models.header_bag import HeaderBag


def get_header(bag: HeaderBag, name: str) -> str | None:
    """Return a header's plain text value, or None if it is missing.

    An explicitly empty header returns ``""``. Keep the two apart in security
    checks: a missing header must never compare equal to anything.
    """
    return bag.get(name)


def has_header(bag: HeaderBag, name: str) -> bool:
    """Return True if the header was published, even with an empty value."""
    return name in bag

"""Header bag domain model."""

from collections.abc import Iterator, Mapping

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization", "x-api-key"})


class HeaderBag(Mapping[str, str | None]):
    """Immutable mapping of lower-cased header names to raw header values.

    Created once per request from the payload the gateway publishes. Values are
    kept exactly as published; ``None`` stands for a JSON ``null``.
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Mapping[str, str | None] | None = None) -> None:
        normalized: dict[str, str | None] = {}
        # Later keys win on case-insensitive collisions
        for name, value in (headers or {}).items():
            normalized[name.lower()] = value
        self._headers = normalized

    @classmethod
    def empty(cls) -> "HeaderBag":
        """Return a bag without any headers."""
        return cls()

    def __getitem__(self, name: str) -> str | None:
        return self._headers[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderBag):
            return self._headers == other._headers
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._headers.items()))

    def __repr__(self) -> str:
        return f"HeaderBag({self.redacted()!r})"

    def redacted(self) -> dict[str, str | None]:
        """Return a plain dict copy with credentials masked, safe for logging."""
        return {
            name: "***REDACTED***" if name in SENSITIVE_HEADERS else value
            for name, value in self._headers.items()
        }

"""Forwarded-for chain domain model."""

from pydantic import BaseModel, ConfigDict


class ForwardedForChain(BaseModel):
    """Ordered addresses accumulated by proxies in ``X-Forwarded-For``.

    Any client can send its own ``X-Forwarded-For``, so the leftmost entry is
    whatever the first hop claims. Use it for logging and convenience checks,
    not for authentication.
    """

    model_config = ConfigDict(frozen=True)

    addresses: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str | None) -> "ForwardedForChain":
        """Split a raw header value into trimmed, non-empty addresses."""
        if not value:
            return cls()
        segments = (segment.strip() for segment in value.split(","))
        return cls(addresses=tuple(segment for segment in segments if segment))

    @property
    def first(self) -> str | None:
        """Leftmost address, or None for an empty chain."""
        return self.addresses[0] if self.addresses else None

    def __len__(self) -> int:
        return len(self.addresses)

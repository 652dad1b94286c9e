"""Errors raised while reading the published request headers.

A missing header is not an error; lookups return ``None`` for it.
"""


class HeaderIntrospectionError(Exception):
    """Base class for header introspection failures."""


class UnavailableContext(HeaderIntrospectionError):
    """No request context is active, e.g. inside a background job.

    Callers should treat this as "no headers", not as a failure.
    """

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"No request headers published under setting '{setting_name}'")
        self.setting_name = setting_name


class MalformedHeaderPayload(HeaderIntrospectionError):
    """The published value is not a flat JSON object of string values.

    This points at a broken gateway or a tampered setting and must surface.
    """

    def __init__(self, setting_name: str, reason: str) -> None:
        super().__init__(f"Malformed header payload in setting '{setting_name}': {reason}")
        self.setting_name = setting_name
        self.reason = reason

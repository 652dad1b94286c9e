"""Setting source contract (protocol)."""

from typing import Protocol


class SettingSourceProtocol(Protocol):
    """Request-scoped lookup of settings published by the gateway."""

    def current_setting(self, name: str) -> str | None:
        """Return the value of a setting for the current request.

        Args:
            name: Setting name, e.g. ``request.headers``.

        Returns:
            The raw setting value, or None if the setting is not present.
        """
        ...

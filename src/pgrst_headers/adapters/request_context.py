"""In-memory request context holding the settings published for one request."""

import json
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from pgrst_headers.domain.models.introspection_settings import DEFAULT_SETTING_NAME


class RequestContext(BaseModel):
    """Snapshot of the per-request settings, passed explicitly to introspection code.

    One instance belongs to exactly one request. Create a new one per request
    instead of reusing or caching it.
    """

    model_config = ConfigDict(frozen=True)

    settings: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def none(cls) -> "RequestContext":
        """Context for code running outside any request, e.g. a batch job."""
        return cls()

    @classmethod
    def with_headers(
        cls, headers: Mapping[str, str | None], setting_name: str = DEFAULT_SETTING_NAME
    ) -> "RequestContext":
        """Build a context carrying headers in the gateway's JSON format."""
        payload = {name.lower(): value for name, value in headers.items()}
        return cls(settings={setting_name: json.dumps(payload)})

    def current_setting(self, name: str) -> str | None:
        return self.settings.get(name)

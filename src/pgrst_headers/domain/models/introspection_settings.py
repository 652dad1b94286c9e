"""Introspection settings domain model."""

from pydantic import BaseModel, ConfigDict, Field

from pgrst_headers.domain.models.platform_rules import DEFAULT_PLATFORM_RULES, PlatformRuleTable

DEFAULT_SETTING_NAME = "request.headers"


class IntrospectionSettings(BaseModel):
    """Deployment-specific inputs for header-based policy checks."""

    model_config = ConfigDict(frozen=True)

    setting_name: str = DEFAULT_SETTING_NAME
    ip_whitelist: frozenset[str] = Field(default_factory=frozenset)
    expected_host: str | None = None
    expected_origin: str | None = None
    version_header: str = "x-client-version"
    minimum_version: str | None = None
    log_headers: bool = False
    platform_rules: PlatformRuleTable = DEFAULT_PLATFORM_RULES

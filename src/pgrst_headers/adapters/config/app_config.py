"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pgrst_headers.adapters.postgres.sql_functions import validate_setting_name
from pgrst_headers.domain.models.introspection_settings import DEFAULT_SETTING_NAME
from pgrst_headers.domain.models.platform_rules import DEFAULT_PLATFORM_RULES, PlatformRuleTable

_VERSION_CHARS = frozenset("0123456789.")


def _normalize_version_header(value: str) -> str:
    if not value.strip():
        raise ValueError("version_header must not be empty")
    return value.strip().lower()


def _check_minimum_version(value: str) -> str:
    stripped = value.strip().removeprefix("v")
    parts = stripped.split(".")
    if not stripped or set(stripped) - _VERSION_CHARS or not all(parts):
        raise ValueError("minimum_version must be a dotted numeric version like '2.1.0'")
    return value.strip()


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gateway configuration
    header_setting_name: str = Field(
        default=DEFAULT_SETTING_NAME,
        description="Setting under which the gateway publishes request headers as JSON",
    )

    # Policy configuration
    ip_whitelist: list[str] = Field(
        default_factory=list,
        description="Client IPs allowed by the whitelist predicate (exact match, no CIDR)",
    )
    expected_host: str | None = Field(
        default=None, description="Host header value trusted by host checks"
    )
    expected_origin: str | None = Field(
        default=None, description="Origin header value trusted by origin checks"
    )
    version_header: str = Field(
        default="x-client-version", description="Header carrying the client's version"
    )
    minimum_version: str | None = Field(
        default=None, description="Lowest accepted client version (dotted numeric)"
    )

    # Logging
    log_headers: bool = Field(
        default=False,
        description="Log each loaded header bag (credentials redacted) at INFO level",
    )

    # TOML config file path (optional)
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [policy] and [platform] sections",
    )

    @field_validator("header_setting_name")
    @classmethod
    def validate_header_setting_name(cls, v: str) -> str:
        """Validate the setting name looks like 'namespace.name'."""
        return validate_setting_name(v)

    @field_validator("version_header")
    @classmethod
    def validate_version_header(cls, v: str) -> str:
        """Normalize the version header name to lower case."""
        return _normalize_version_header(v)

    @field_validator("minimum_version")
    @classmethod
    def validate_minimum_version(cls, v: str | None) -> str | None:
        """Validate minimum_version is a dotted numeric version."""
        if v is None:
            return v
        return _check_minimum_version(v)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating policy settings."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update policy settings from TOML if present
        policy = toml_data.get("policy", {})
        if not isinstance(policy, dict):
            raise ValueError("TOML config 'policy' must be a table")
        if "ip_whitelist" in policy:
            whitelist = policy["ip_whitelist"]
            if not isinstance(whitelist, list):
                raise ValueError("TOML config 'policy.ip_whitelist' must be a list")
            self.ip_whitelist = [str(ip) for ip in whitelist]
        for key in ("expected_host", "expected_origin"):
            if key in policy:
                if not isinstance(policy[key], str):
                    raise ValueError(f"TOML config 'policy.{key}' must be a string")
                setattr(self, key, policy[key])
        if "version_header" in policy:
            self.version_header = _normalize_version_header(str(policy["version_header"]))
        if "minimum_version" in policy:
            self.minimum_version = _check_minimum_version(str(policy["minimum_version"]))

        return toml_data

    def get_platform_rules(self) -> PlatformRuleTable:
        """Return the platform rule table from the [platform] TOML section.

        Falls back to the built-in table when no file or section is configured.
        A partial section replaces only the keys it sets.
        """
        toml_data = self._load_toml_data()
        platform = toml_data.get("platform")
        if platform is None:
            return DEFAULT_PLATFORM_RULES
        if not isinstance(platform, dict):
            raise ValueError("TOML config 'platform' must be a table")

        merged = DEFAULT_PLATFORM_RULES.model_dump()
        merged.update({k: v for k, v in platform.items() if k in merged})
        try:
            return PlatformRuleTable.model_validate(merged)
        except ValidationError as e:
            raise ValueError(f"Invalid TOML config 'platform': {e}") from e

"""Adapters layer - setting sources, SQL rendering and configuration."""

from pgrst_headers.adapters.config import AppConfig, IntrospectionSettingsLoader
from pgrst_headers.adapters.postgres import PostgresSettingSource
from pgrst_headers.adapters.request_context import RequestContext

__all__ = [
    "AppConfig",
    "IntrospectionSettingsLoader",
    "PostgresSettingSource",
    "RequestContext",
]

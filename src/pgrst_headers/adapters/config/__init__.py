"""Configuration adapters."""

from pgrst_headers.adapters.config.app_config import AppConfig
from pgrst_headers.adapters.config.settings_loader import IntrospectionSettingsLoader

__all__ = ["AppConfig", "IntrospectionSettingsLoader"]

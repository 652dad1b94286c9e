"""Introspection settings loader."""

import logging

from pgrst_headers.adapters.config.app_config import AppConfig
from pgrst_headers.domain.models.introspection_settings import IntrospectionSettings

logger = logging.getLogger(__name__)


class IntrospectionSettingsLoader:
    """Loads introspection settings from app config."""

    @staticmethod
    def load(config: AppConfig) -> IntrospectionSettings:
        """Load introspection settings from app config."""
        # Reads the TOML file, which may also override policy fields
        platform_rules = config.get_platform_rules()

        whitelist = frozenset(ip.strip() for ip in config.ip_whitelist if ip.strip())
        if not whitelist:
            logger.info("IP whitelist is empty; whitelist checks will deny every client")

        return IntrospectionSettings(
            setting_name=config.header_setting_name,
            ip_whitelist=whitelist,
            expected_host=config.expected_host,
            expected_origin=config.expected_origin,
            version_header=config.version_header,
            minimum_version=config.minimum_version,
            log_headers=config.log_headers,
            platform_rules=platform_rules,
        )

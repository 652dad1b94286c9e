"""Domain contracts (protocols)."""

from pgrst_headers.domain.contracts.setting_source import SettingSourceProtocol

__all__ = ["SettingSourceProtocol"]

"""PostgreSQL adapters."""

from pgrst_headers.adapters.postgres.setting_source import PostgresSettingSource
from pgrst_headers.adapters.postgres.sql_functions import (
    render_header_functions,
    render_whitelist_policy,
)

__all__ = ["PostgresSettingSource", "render_header_functions", "render_whitelist_policy"]

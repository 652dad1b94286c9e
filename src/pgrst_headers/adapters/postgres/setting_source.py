"""PostgreSQL setting source reading ``current_setting`` through a DB-API cursor."""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# missing_ok=true turns an unknown setting into NULL instead of an error
CURRENT_SETTING_SQL = "SELECT current_setting(%s, true)"


class Cursor(Protocol):
    """The subset of a DB-API 2.0 cursor this adapter needs."""

    def execute(self, operation: str, parameters: Any = ...) -> Any: ...

    def fetchone(self) -> Any: ...


class PostgresSettingSource:
    """Reads per-transaction settings published by the gateway.

    The gateway sets ``request.headers`` with ``SET LOCAL`` semantics, so the
    cursor must belong to the transaction serving the request.
    """

    def __init__(self, cursor: Cursor) -> None:
        self._cursor = cursor

    def current_setting(self, name: str) -> str | None:
        self._cursor.execute(CURRENT_SETTING_SQL, (name,))
        row = self._cursor.fetchone()
        if row is None:
            logger.debug(f"current_setting('{name}') returned no row")
            return None
        value = row[0]
        if value is None:
            return None
        return str(value)

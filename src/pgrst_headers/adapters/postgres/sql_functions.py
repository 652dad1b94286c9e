"""SQL counterparts of the header helpers, for use inside PostgreSQL.

The rendered functions unwrap values with ``->>`` so they return text. The
``->`` operator would return a JSON-quoted string (``'"localhost:3000"'``),
which never compares equal to a plain literal in a policy.
"""

import re
from collections.abc import Iterable

from pgrst_headers.domain.models.introspection_settings import DEFAULT_SETTING_NAME

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
SETTING_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)+$")


def validate_identifier(value: str) -> str:
    """Return value if it is a plain SQL identifier, else raise ValueError."""
    if not IDENTIFIER_PATTERN.match(value):
        raise ValueError(f"Invalid SQL identifier: {value!r}")
    return value


def validate_setting_name(value: str) -> str:
    """Return value if it is a dotted custom setting name, else raise ValueError."""
    if not SETTING_NAME_PATTERN.match(value):
        raise ValueError(f"Invalid setting name: {value!r} (expected e.g. 'request.headers')")
    return value


def quote_literal(value: str) -> str:
    """Quote a value as a SQL string literal."""
    return "'" + value.replace("'", "''") + "'"


def render_header_functions(
    schema: str = "api", setting_name: str = DEFAULT_SETTING_NAME
) -> str:
    """Render CREATE FUNCTION statements for ``get_header`` and ``client_ip``."""
    schema = validate_identifier(schema)
    setting = quote_literal(validate_setting_name(setting_name))
    return f"""\
CREATE OR REPLACE FUNCTION {schema}.get_header(item text)
RETURNS text
LANGUAGE sql
STABLE
AS $$
    SELECT NULLIF(current_setting({setting}, true), '')::json ->> lower(item);
$$;

CREATE OR REPLACE FUNCTION {schema}.client_ip()
RETURNS text
LANGUAGE sql
STABLE
AS $$
    SELECT btrim(segment)
    FROM unnest(string_to_array({schema}.get_header('x-forwarded-for'), ','))
        WITH ORDINALITY AS hops(segment, hop)
    WHERE btrim(segment) <> ''
    ORDER BY hop
    LIMIT 1;
$$;
"""


def client_ip_sql(schema: str = "api") -> str:
    """SQL expression returning the client IP via the rendered function."""
    return f"{validate_identifier(schema)}.client_ip()"


def render_whitelist_policy(
    table: str, policy: str, whitelist: Iterable[str], schema: str = "api"
) -> str:
    """Render a row-level security policy limiting access to whitelisted IPs.

    An absent client IP yields NULL, which PostgreSQL treats as a failed check.
    """
    table = validate_identifier(table)
    policy = validate_identifier(policy)
    addresses = sorted(set(whitelist))
    if not addresses:
        # An empty IN list is a syntax error; an empty whitelist admits nobody
        condition = "false"
    else:
        literals = ", ".join(quote_literal(address) for address in addresses)
        condition = f"{client_ip_sql(schema)} IN ({literals})"
    return f"CREATE POLICY {policy} ON {table}\n    USING ({condition});\n"

"""Access to the header bag the gateway publishes for the current request."""

import logging

from pydantic import TypeAdapter, ValidationError

from pgrst_headers.domain.contracts.setting_source import SettingSourceProtocol
from pgrst_headers.domain.errors import MalformedHeaderPayload, UnavailableContext
from pgrst_headers.domain.models.header_bag import HeaderBag
from pgrst_headers.domain.models.introspection_settings import DEFAULT_SETTING_NAME

logger = logging.getLogger(__name__)

_PAYLOAD_ADAPTER: TypeAdapter[dict[str, str | None]] = TypeAdapter(dict[str, str | None])


def parse_header_payload(raw: str, setting_name: str = DEFAULT_SETTING_NAME) -> HeaderBag:
    """Parse a published JSON payload into a HeaderBag.

    Raises:
        MalformedHeaderPayload: If the payload is not a flat JSON object whose
            values are strings or null.
    """
    try:
        headers = _PAYLOAD_ADAPTER.validate_json(raw)
    except ValidationError as e:
        logger.warning(
            f"Rejecting header payload from '{setting_name}': {e.error_count()} validation error(s)"
        )
        raise MalformedHeaderPayload(setting_name, str(e)) from e
    return HeaderBag(headers)


def get_headers(
    source: SettingSourceProtocol, setting_name: str = DEFAULT_SETTING_NAME
) -> HeaderBag:
    """Read and parse the current request's headers.

    The source is read on every call. Bags must never outlive their request,
    so nothing here is cached.

    Raises:
        UnavailableContext: If no request context is active.
        MalformedHeaderPayload: If the published value cannot be parsed.
    """
    raw = source.current_setting(setting_name)
    # PostgreSQL reports an unset custom setting as NULL, and as '' once the
    # transaction that set it with SET LOCAL has ended
    if raw is None or raw == "":
        logger.debug(f"No request context: setting '{setting_name}' is not set")
        raise UnavailableContext(setting_name)
    return parse_header_payload(raw, setting_name)


def get_headers_or_empty(
    source: SettingSourceProtocol, setting_name: str = DEFAULT_SETTING_NAME
) -> HeaderBag:
    """Like get_headers, but an inactive request context yields an empty bag.

    MalformedHeaderPayload still propagates.
    """
    try:
        return get_headers(source, setting_name)
    except UnavailableContext:
        return HeaderBag.empty()

"""Application services (use cases) for header introspection."""

from pgrst_headers.application.services.client_signal_deriver import (
    classify_platform,
    derive_client_ip,
    derive_client_signals,
    parse_forwarded_for,
)
from pgrst_headers.application.services.header_introspection_service import (
    HeaderIntrospectionService,
)
from pgrst_headers.application.services.header_lookup import get_header, has_header
from pgrst_headers.application.services.header_store import (
    get_headers,
    get_headers_or_empty,
    parse_header_payload,
)
from pgrst_headers.application.services.policy_predicates import (
    compare_versions,
    header_equals,
    host_equals,
    in_whitelist,
    origin_equals,
    parse_version,
    version_at_least,
)

__all__ = [
    "HeaderIntrospectionService",
    "classify_platform",
    "compare_versions",
    "derive_client_ip",
    "derive_client_signals",
    "get_header",
    "get_headers",
    "get_headers_or_empty",
    "has_header",
    "header_equals",
    "host_equals",
    "in_whitelist",
    "origin_equals",
    "parse_forwarded_for",
    "parse_header_payload",
    "parse_version",
    "version_at_least",
]

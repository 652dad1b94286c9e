"""Header introspection service."""

import logging

from pgrst_headers.application.services.client_signal_deriver import derive_client_signals
from pgrst_headers.application.services.header_lookup import get_header
from pgrst_headers.application.services.header_store import get_headers, get_headers_or_empty
from pgrst_headers.application.services.policy_predicates import (
    host_equals,
    in_whitelist,
    origin_equals,
    version_at_least,
)
from pgrst_headers.domain.contracts.setting_source import SettingSourceProtocol
from pgrst_headers.domain.models.audit_record import AuditRecord
from pgrst_headers.domain.models.client_signals import ClientSignals
from pgrst_headers.domain.models.header_bag import HeaderBag
from pgrst_headers.domain.models.introspection_settings import IntrospectionSettings

logger = logging.getLogger(__name__)


class HeaderIntrospectionService:
    """Applies deployment settings to the headers of the current request.

    The service keeps no per-request state. Every method takes the request's
    setting source and reads it again.
    """

    def __init__(self, settings: IntrospectionSettings | None = None) -> None:
        """Initialize with introspection settings (defaults if omitted)."""
        self._settings = settings or IntrospectionSettings()

    @property
    def settings(self) -> IntrospectionSettings:
        return self._settings

    def _log_bag(self, bag: HeaderBag) -> None:
        if self._settings.log_headers:
            logger.info(f"Request headers: {bag.redacted()}")

    def headers(self, source: SettingSourceProtocol) -> HeaderBag:
        """Return the request's header bag, raising if no request is active."""
        bag = get_headers(source, self._settings.setting_name)
        self._log_bag(bag)
        return bag

    def headers_or_empty(self, source: SettingSourceProtocol) -> HeaderBag:
        """Return the request's header bag, or an empty bag outside a request."""
        bag = get_headers_or_empty(source, self._settings.setting_name)
        self._log_bag(bag)
        return bag

    def client_signals(self, source: SettingSourceProtocol) -> ClientSignals:
        bag = self.headers_or_empty(source)
        return derive_client_signals(bag, self._settings.platform_rules)

    def is_whitelisted(self, source: SettingSourceProtocol) -> bool:
        """Check the derived client IP against the configured whitelist."""
        signals = self.client_signals(source)
        allowed = in_whitelist(signals.client_ip, self._settings.ip_whitelist)
        if not allowed:
            logger.debug(f"Client IP {signals.client_ip!r} is not whitelisted")
        return allowed

    def is_trusted_host(self, source: SettingSourceProtocol) -> bool:
        """Check the Host header; False when no host is configured."""
        if self._settings.expected_host is None:
            return False
        return host_equals(self.headers_or_empty(source), self._settings.expected_host)

    def is_trusted_origin(self, source: SettingSourceProtocol) -> bool:
        """Check the Origin header; False when no origin is configured."""
        if self._settings.expected_origin is None:
            return False
        return origin_equals(self.headers_or_empty(source), self._settings.expected_origin)

    def meets_minimum_version(self, source: SettingSourceProtocol) -> bool:
        """Check the client version header; True when no minimum is configured."""
        if self._settings.minimum_version is None:
            return True
        return version_at_least(
            self.headers_or_empty(source),
            self._settings.version_header,
            self._settings.minimum_version,
        )

    def audit_record(self, source: SettingSourceProtocol) -> AuditRecord:
        """Build the audit metadata for the current request.

        Outside a request (e.g. a batch job firing a trigger) every field is
        absent and the platform is Unknown.
        """
        bag = self.headers_or_empty(source)
        signals = derive_client_signals(bag, self._settings.platform_rules)
        return AuditRecord(
            client_ip=signals.client_ip,
            user_agent=get_header(bag, "user-agent"),
            host=get_header(bag, "host"),
            origin=get_header(bag, "origin"),
            platform_family=signals.platform_family,
            is_mobile=signals.is_mobile,
        )

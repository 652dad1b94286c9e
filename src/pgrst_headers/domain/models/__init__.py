"""Domain models for request header introspection."""

from pgrst_headers.domain.models.audit_record import AuditRecord
from pgrst_headers.domain.models.client_signals import (
    ClientSignals,
    PlatformClassification,
    PlatformFamily,
)
from pgrst_headers.domain.models.forwarded_for_chain import ForwardedForChain
from pgrst_headers.domain.models.header_bag import HeaderBag
from pgrst_headers.domain.models.introspection_settings import (
    DEFAULT_SETTING_NAME,
    IntrospectionSettings,
)
from pgrst_headers.domain.models.platform_rules import (
    DEFAULT_PLATFORM_RULES,
    PlatformRule,
    PlatformRuleTable,
)

__all__ = [
    "DEFAULT_PLATFORM_RULES",
    "DEFAULT_SETTING_NAME",
    "AuditRecord",
    "ClientSignals",
    "ForwardedForChain",
    "HeaderBag",
    "IntrospectionSettings",
    "PlatformClassification",
    "PlatformFamily",
    "PlatformRule",
    "PlatformRuleTable",
]

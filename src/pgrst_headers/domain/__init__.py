"""Domain layer - header models, errors and contracts."""

from pgrst_headers.domain.contracts import SettingSourceProtocol
from pgrst_headers.domain.errors import (
    HeaderIntrospectionError,
    MalformedHeaderPayload,
    UnavailableContext,
)
from pgrst_headers.domain.models import (
    ClientSignals,
    ForwardedForChain,
    HeaderBag,
    PlatformClassification,
    PlatformFamily,
)

__all__ = [
    "ClientSignals",
    "ForwardedForChain",
    "HeaderBag",
    "HeaderIntrospectionError",
    "MalformedHeaderPayload",
    "PlatformClassification",
    "PlatformFamily",
    "SettingSourceProtocol",
    "UnavailableContext",
]

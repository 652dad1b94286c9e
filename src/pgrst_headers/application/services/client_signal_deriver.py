"""Derivation of client IP and platform signals from request headers.

Everything here is best-effort and spoofable by the client. The results are
meant for logging, auditing and convenience checks.
"""

from pgrst_headers.application.services.header_lookup import get_header
from pgrst_headers.domain.models.client_signals import (
    ClientSignals,
    PlatformClassification,
    PlatformFamily,
)
from pgrst_headers.domain.models.forwarded_for_chain import ForwardedForChain
from pgrst_headers.domain.models.header_bag import HeaderBag
from pgrst_headers.domain.models.platform_rules import DEFAULT_PLATFORM_RULES, PlatformRuleTable

FORWARDED_FOR_HEADER = "x-forwarded-for"
USER_AGENT_HEADER = "user-agent"


def parse_forwarded_for(bag: HeaderBag) -> ForwardedForChain:
    """Parse the X-Forwarded-For header into a chain of addresses."""
    return ForwardedForChain.parse(get_header(bag, FORWARDED_FOR_HEADER))


def derive_client_ip(bag: HeaderBag) -> str | None:
    """Return the leftmost non-empty X-Forwarded-For entry, or None.

    Trust assumption: the leftmost entry is whatever the first hop claims and
    any client can forge it. It is not authentication-grade. Whether a
    rightmost, proxy-appended entry would be safer depends on the deployment's
    gateway and is not decided here.
    """
    return parse_forwarded_for(bag).first


def classify_platform(
    bag: HeaderBag, rules: PlatformRuleTable = DEFAULT_PLATFORM_RULES
) -> PlatformClassification:
    """Classify the user agent into a coarse platform family.

    Family rules are case-sensitive substring checks applied in order, first
    match wins. A user agent matching no family rule but carrying a mobile
    marker is classified as Other. ``is_mobile`` is computed independently of
    the family.
    """
    user_agent = get_header(bag, USER_AGENT_HEADER)
    if user_agent is None:
        return PlatformClassification(platform_family=PlatformFamily.UNKNOWN, is_mobile=False)

    is_mobile = any(marker in user_agent for marker in rules.mobile_markers)

    for rule in rules.family_rules:
        if rule.marker in user_agent:
            return PlatformClassification(platform_family=rule.family, is_mobile=is_mobile)

    family = PlatformFamily.OTHER if is_mobile else PlatformFamily.UNKNOWN
    return PlatformClassification(platform_family=family, is_mobile=is_mobile)


def derive_client_signals(
    bag: HeaderBag, rules: PlatformRuleTable = DEFAULT_PLATFORM_RULES
) -> ClientSignals:
    """Compute all client signals for a request."""
    classification = classify_platform(bag, rules)
    return ClientSignals(
        client_ip=derive_client_ip(bag),
        platform_family=classification.platform_family,
        is_mobile=classification.is_mobile,
    )

"""Platform classification rule table."""

from pydantic import BaseModel, ConfigDict

from pgrst_headers.domain.models.client_signals import PlatformFamily


class PlatformRule(BaseModel):
    """Maps a case-sensitive user agent substring to a platform family."""

    model_config = ConfigDict(frozen=True)

    marker: str
    family: PlatformFamily


class PlatformRuleTable(BaseModel):
    """Ordered family rules (first match wins) plus mobile markers."""

    model_config = ConfigDict(frozen=True)

    family_rules: tuple[PlatformRule, ...]
    mobile_markers: tuple[str, ...]


DEFAULT_PLATFORM_RULES = PlatformRuleTable(
    family_rules=(
        PlatformRule(marker="Windows", family=PlatformFamily.WINDOWS),
        # iOS user agents also contain "like Mac OS X", so these go first
        PlatformRule(marker="iPhone OS", family=PlatformFamily.IOS),
        PlatformRule(marker="iPad", family=PlatformFamily.IOS),
        PlatformRule(marker="iPod", family=PlatformFamily.IOS),
        PlatformRule(marker="Mac OS X", family=PlatformFamily.MAC),
        PlatformRule(marker="Android", family=PlatformFamily.ANDROID),
    ),
    mobile_markers=(
        "iPhone",
        "iPad",
        "iPod",
        "Android",
        "Mobile",
        "BlackBerry",
        "Opera Mini",
        "IEMobile",
        "Windows Phone",
    ),
)

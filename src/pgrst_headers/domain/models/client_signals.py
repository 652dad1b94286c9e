"""Client signal domain models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PlatformFamily(str, Enum):
    """Coarse operating system family guessed from a user agent."""

    WINDOWS = "Windows"
    MAC = "Mac"
    IOS = "iOS"
    ANDROID = "Android"
    OTHER = "Other"
    UNKNOWN = "Unknown"


class PlatformClassification(BaseModel):
    """Result of classifying a user agent."""

    model_config = ConfigDict(frozen=True)

    platform_family: PlatformFamily
    is_mobile: bool


class ClientSignals(BaseModel):
    """Signals derived from a request's headers.

    Short-lived and computed on demand; persisting them is up to the caller.
    """

    model_config = ConfigDict(frozen=True)

    client_ip: str | None = None
    platform_family: PlatformFamily = PlatformFamily.UNKNOWN
    is_mobile: bool = False

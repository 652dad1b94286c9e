"""Audit record domain model."""

from pydantic import BaseModel, ConfigDict

from pgrst_headers.domain.models.client_signals import PlatformFamily


class AuditRecord(BaseModel):
    """Request metadata a data-mutation trigger can write to an audit table."""

    model_config = ConfigDict(frozen=True)

    client_ip: str | None = None
    user_agent: str | None = None
    host: str | None = None
    origin: str | None = None
    platform_family: PlatformFamily = PlatformFamily.UNKNOWN
    is_mobile: bool = False

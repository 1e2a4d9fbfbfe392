"""Feature flag administration models."""

from typing import Any

from pydantic import BaseModel, Field


class FlagOverrideRequest(BaseModel):
    """Partial capability record for one tenant.

    Values are checked by the flag resolver so that unknown names and
    non-boolean values produce FLAG_UNKNOWN / FLAG_INVALID.
    """

    flags: dict[str, Any] = Field(..., description="Capability name to boolean")


class TenantFlagsResponse(BaseModel):
    """Effective flags for a tenant, and the override behind them."""

    tenant_id: str
    flags: dict[str, bool]
    override: dict[str, bool]


class CapabilityTenantsResponse(BaseModel):
    """Tenants whose override enables a capability."""

    capability: str
    tenant_ids: list[str]

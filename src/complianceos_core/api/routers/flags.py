"""Feature flag administration router.

Authorization is left to the deployment (gateway or admin network).
"""

from fastapi import APIRouter, Request

from complianceos_core.api.models import (
    CapabilityTenantsResponse,
    FlagOverrideRequest,
    TenantFlagsResponse,
)
from complianceos_core.errors import create_error
from complianceos_core.extensions import CAPABILITY_NAMES, FeatureFlagResolver

flag_router = APIRouter(tags=["Flags"])


def _tenant_flags(resolver: FeatureFlagResolver, tenant_id: str) -> TenantFlagsResponse:
    return TenantFlagsResponse(
        tenant_id=tenant_id,
        flags=resolver.get_flags(tenant_id).to_dict(),
        override=resolver.get_override(tenant_id),
    )


@flag_router.get("/tenants/{tenant_id}/flags", response_model=TenantFlagsResponse)
async def get_tenant_flags(tenant_id: str, request: Request) -> TenantFlagsResponse:
    """Effective flags for a tenant (defaults for unknown tenants)."""
    return _tenant_flags(request.app.state.flags, tenant_id)


@flag_router.put("/tenants/{tenant_id}/flags", response_model=TenantFlagsResponse)
async def set_tenant_flags(
    tenant_id: str, body: FlagOverrideRequest, request: Request
) -> TenantFlagsResponse:
    """Merge a partial capability record into the tenant's override."""
    resolver: FeatureFlagResolver = request.app.state.flags
    resolver.set_override(tenant_id, body.flags)
    return _tenant_flags(resolver, tenant_id)


@flag_router.delete("/tenants/{tenant_id}/flags", response_model=TenantFlagsResponse)
async def clear_tenant_flags(tenant_id: str, request: Request) -> TenantFlagsResponse:
    """Drop the tenant's override so it falls back to the defaults."""
    resolver: FeatureFlagResolver = request.app.state.flags
    resolver.clear_override(tenant_id)
    return _tenant_flags(resolver, tenant_id)


@flag_router.get("/flags/{capability}/tenants", response_model=CapabilityTenantsResponse)
async def list_capability_tenants(capability: str, request: Request) -> CapabilityTenantsResponse:
    """Tenants whose override enables ``capability``.

    Tenants that only get it from the defaults are not listed.
    """
    if capability not in CAPABILITY_NAMES:
        raise create_error("FLAG_UNKNOWN", capability=capability)

    resolver: FeatureFlagResolver = request.app.state.flags
    return CapabilityTenantsResponse(
        capability=capability,
        tenant_ids=resolver.list_tenants_with_capability(capability),
    )

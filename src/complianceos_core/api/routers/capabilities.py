"""Capabilities endpoint.

GET /api/v1/capabilities tells clients which edition is running and which
capabilities a tenant has, so the UI can render upgrade prompts.
"""

from fastapi import APIRouter, Query

from complianceos_core.extensions.capabilities import get_capabilities_provider

router = APIRouter(prefix="/api/v1", tags=["capabilities"])


@router.get("/capabilities")
async def get_capabilities(
    tenant_id: str | None = Query(None, description="Report effective flags for this tenant"),
) -> dict:
    """
    Get server capabilities.

    Returns:
        dict: Capabilities including:
            - edition: "core" or "premium"
            - version: Server version
            - features: Capability name to availability (edition and flags)
            - slots: Populated slots and their component counts
            - limits: Capabilities that need the premium edition
    """
    provider = get_capabilities_provider()
    capabilities = provider.get_capabilities(tenant_id)
    return capabilities.to_dict()

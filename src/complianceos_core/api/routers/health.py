"""Health router."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request

from complianceos_core.api.models import HealthCheck, HealthStatus

health_router = APIRouter(tags=["Health"])


@health_router.get("/health", response_model=HealthCheck)
async def health_check(request: Request) -> HealthCheck:
    """Report the edition and whether registrars ran.

    Premium without an installed registrar is degraded: the premium surface
    answers but no premium components render.
    """
    edition = request.app.state.edition
    host = request.app.state.registrar_host
    registry = request.app.state.registry

    checks = {
        "edition": edition.edition.value,
        "registry": f"{sum(registry.counts().values())} components",
    }

    if edition.is_premium:
        installed = host.is_installed(edition.module_name)
        checks["registrar"] = "installed" if installed else "not_installed"
        status = HealthStatus.HEALTHY if installed else HealthStatus.DEGRADED
    else:
        checks["registrar"] = "not_applicable"
        status = HealthStatus.HEALTHY

    return HealthCheck(
        status=status,
        edition=edition.edition.value,
        checks=checks,
        timestamp=datetime.now(UTC),
    )

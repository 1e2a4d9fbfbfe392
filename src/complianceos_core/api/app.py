"""REST API application factory."""

from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from complianceos_core.api.errors import setup_error_handlers
from complianceos_core.api.middleware import RequestIDMiddleware
from complianceos_core.api.routers import (
    advisor_router,
    capabilities_router,
    flag_router,
    health_router,
    slot_router,
)
from complianceos_core.config import APIConfig
from complianceos_core.editions import get_edition
from complianceos_core.extensions import RegistrarHost, SlotRegistry, get_flag_resolver
from complianceos_core.extensions.gate import CapabilityGate

if TYPE_CHECKING:
    from complianceos_core.config import ComplianceConfig
    from complianceos_core.editions import EditionResolution
    from complianceos_core.extensions import FeatureFlagResolver
    from complianceos_core.logging import ComplianceLogger


def create_app(
    config: APIConfig | None = None,
    edition: "EditionResolution | None" = None,
    flags: "FeatureFlagResolver | None" = None,
    registry: SlotRegistry | None = None,
    registrar_host: RegistrarHost | None = None,
    gate: CapabilityGate | None = None,
    logger: "ComplianceLogger | None" = None,
    compliance_config: "ComplianceConfig | None" = None,
) -> FastAPI:
    """Create FastAPI application with all routes.

    Anything not passed falls back to the process-wide instance.

    Args:
        config: REST API configuration
        edition: Resolved edition (defaults to get_edition())
        flags: Feature flag resolver
        registry: Slot registry read by the slots API
        registrar_host: Host that installed registrars (for health)
        gate: Capability gate used by the advisor routes
        logger: Optional component logger
        compliance_config: Full configuration, kept for diagnostics

    Returns:
        Configured FastAPI application
    """
    from complianceos_core import __version__

    config = config or APIConfig()
    edition = edition or get_edition()
    flags = flags or get_flag_resolver()
    registry = registry or SlotRegistry.get()

    app = FastAPI(
        title=config.title,
        version=__version__,
        docs_url="/docs" if config.docs_enabled else None,
        redoc_url="/redoc" if config.docs_enabled else None,
        openapi_url="/openapi.json" if config.docs_enabled else None,
    )

    # Store dependencies in app state
    app.state.config = config
    app.state.compliance_config = compliance_config
    app.state.logger = logger
    app.state.edition = edition
    app.state.flags = flags
    app.state.registry = registry
    app.state.registrar_host = registrar_host or RegistrarHost(registry, logger)
    app.state.gate = gate or CapabilityGate(edition=edition, flags=flags, logger=logger)

    # Add middleware (order matters - first added is outermost)
    app.add_middleware(RequestIDMiddleware)

    if config.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_error_handlers(app)

    # Include routers
    app.include_router(capabilities_router)  # No prefix - already has /api/v1
    app.include_router(health_router, prefix=config.prefix)
    app.include_router(slot_router, prefix=config.prefix)
    app.include_router(flag_router, prefix=config.prefix)
    app.include_router(advisor_router, prefix=config.prefix)

    return app

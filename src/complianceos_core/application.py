"""ComplianceOS application - startup orchestration.

Wires configuration, logging, the edition decision, feature flags and slot
registrations together, in the order the extension mechanism requires:
the edition is fixed and registrars have run before the API serves its
first request.
"""

import sys
from typing import TextIO

from fastapi import FastAPI

from complianceos_core.api import create_app
from complianceos_core.config import ComplianceConfig, get_config_loader
from complianceos_core.editions import EditionResolution, configure_edition
from complianceos_core.errors import ErrorFactory, ErrorRegistry
from complianceos_core.extensions import (
    CORE_DEFAULTS,
    FeatureFlagResolver,
    RegistrarHost,
    SlotRegistry,
    register_core_defaults,
    set_flag_resolver,
)
from complianceos_core.extensions.capabilities import (
    DefaultCapabilitiesProvider,
    set_capabilities_provider,
)
from complianceos_core.extensions.gate import CapabilityGate, TierLookup
from complianceos_core.logging import ComplianceLogger, LogConfig


class ComplianceApplication:
    """
    ComplianceOS application orchestrator.

    Initialization sequence:

    1. Config loading
    2. Logger setup
    3. Error registry
    4. Edition resolution (fails loudly on a broken premium module)
    5. Feature flag resolver (defaults and seed overrides from config)
    6. Registrar host: core defaults, then the premium registrar when present
    7. Capability gate and capabilities provider
    8. REST API
    """

    def __init__(
        self,
        config_path: str | None = None,
        log_output: TextIO | None = None,
        config: ComplianceConfig | None = None,
        tier_lookup: TierLookup | None = None,
    ):
        """Initialize application.

        Args:
            config_path: Path to config file (optional)
            log_output: Output stream for logs (default: sys.stdout)
            config: Already-loaded configuration; skips file loading
            tier_lookup: Optional tenant plan lookup for the capability gate
        """
        self._config_path = config_path
        self._log_output = log_output or sys.stdout
        self._tier_lookup = tier_lookup
        self._initialized = False

        # Components (initialized in initialize())
        self.config: ComplianceConfig | None = config
        self.logger: ComplianceLogger | None = None
        self.error_registry: ErrorRegistry | None = None
        self.error_factory: ErrorFactory | None = None
        self.edition: EditionResolution | None = None
        self.flags: FeatureFlagResolver | None = None
        self.registry: SlotRegistry | None = None
        self.registrar_host: RegistrarHost | None = None
        self.gate: CapabilityGate | None = None
        self.app: FastAPI | None = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize all components.

        Raises:
            ComplianceError: CONFIG_INVALID, EDITION_LOAD_FAILED,
                EDITION_SHAPE_MISMATCH, EDITION_ALREADY_RESOLVED,
                FLAG_UNKNOWN or SLOT_UNKNOWN; all are startup failures
        """
        if self._initialized:
            return

        # 1. Config
        if self.config is None:
            self.config = get_config_loader().load(self._config_path)

        # 2. Logger
        logging_config = self.config.logging
        log_config = LogConfig(
            level=logging_config.level,
            format=logging_config.format,
            truncate_at=logging_config.truncate_at,
            components={
                "edition": logging_config.components.edition,
                "registry": logging_config.components.registry,
                "flags": logging_config.components.flags,
                "capability": logging_config.components.capability,
            },
            output=self._log_output,
        )
        self.logger = ComplianceLogger(log_config)

        # 3. Error Registry & Factory
        self.error_registry = ErrorRegistry()
        self.error_factory = ErrorFactory(self.error_registry)

        # 4. Edition
        self.edition = configure_edition(self.config.edition, logger_=self.logger)

        # 5. Feature flags
        self.flags = FeatureFlagResolver(
            defaults=self.config.flags.defaults,
            overrides=self.config.flags.overrides,
            logger=self.logger,
        )
        set_flag_resolver(self.flags)

        # 6. Slot registrations
        self.registry = SlotRegistry.get()
        self.registrar_host = RegistrarHost(self.registry, self.logger)
        self.registrar_host.install(CORE_DEFAULTS, register_core_defaults)
        if self.edition.registrar is not None:
            self.registrar_host.install(self.edition.module_name, self.edition.registrar)

        # 7. Gate & capabilities
        self.gate = CapabilityGate(
            edition=self.edition,
            flags=self.flags,
            tier_lookup=self._tier_lookup,
            logger=self.logger,
        )
        set_capabilities_provider(DefaultCapabilitiesProvider())

        # 8. REST API
        self.app = create_app(
            config=self.config.api,
            edition=self.edition,
            flags=self.flags,
            registry=self.registry,
            registrar_host=self.registrar_host,
            gate=self.gate,
            logger=self.logger,
            compliance_config=self.config,
        )

        self._initialized = True

    async def shutdown(self) -> None:
        """Shutdown all components."""
        if not self._initialized:
            return

        self.app = None
        self._initialized = False

    async def start(self) -> None:
        """Initialize (if needed) and serve the REST API with uvicorn."""
        import uvicorn

        if not self._initialized:
            await self.initialize()

        if self.app is None or self.config is None:
            raise RuntimeError("Application not initialized")

        config = uvicorn.Config(
            self.app,
            host=self.config.api.host,
            port=self.config.api.port,
            log_level="info",
        )
        server = uvicorn.Server(config)
        await server.serve()

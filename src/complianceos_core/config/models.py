"""ComplianceOS configuration data models."""

from dataclasses import dataclass, field
from typing import Any

from complianceos_core.types import LogFormat, LogLevel

DEFAULT_PREMIUM_MODULE = "complianceos_premium"


@dataclass
class EditionConfig:
    """Edition selection.

    The premium module is auto-detected; ``disable_premium`` forces the
    core edition even when the module is installed.
    """

    disable_premium: bool = False
    premium_module: str = DEFAULT_PREMIUM_MODULE


@dataclass
class FlagsConfig:
    """Feature flag defaults (fixed at deploy time) and seed overrides."""

    defaults: dict[str, bool] = field(default_factory=dict)
    overrides: dict[str, dict[str, bool]] = field(default_factory=dict)


@dataclass
class LoggingComponentsConfig:
    """Logging components configuration."""

    edition: bool = True
    registry: bool = True
    flags: bool = True
    capability: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.COLORED
    components: LoggingComponentsConfig = field(default_factory=LoggingComponentsConfig)
    truncate_at: int = 200


@dataclass
class APIConfig:
    """REST API configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    prefix: str = "/api/v1"
    title: str = "ComplianceOS Extension API"
    docs_enabled: bool = True
    cors_enabled: bool = True
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:5173"])


@dataclass
class AdvisorConfig:
    """Advisor endpoint used by the premium module."""

    base_url: str = "http://localhost:3002/api/ai"
    timeout: int = 30


@dataclass
class ComplianceConfig:
    """Complete ComplianceOS configuration."""

    edition: EditionConfig = field(default_factory=EditionConfig)
    flags: FlagsConfig = field(default_factory=FlagsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: APIConfig = field(default_factory=APIConfig)
    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for diagnostics."""
        from dataclasses import asdict

        return asdict(self)

"""ComplianceOS configuration - config loading and models."""

from .loader import (
    ConfigLoader,
    get_config_loader,
    parse_bool,
    resolve_env_vars,
)
from .models import (
    DEFAULT_PREMIUM_MODULE,
    AdvisorConfig,
    APIConfig,
    ComplianceConfig,
    EditionConfig,
    FlagsConfig,
    LoggingComponentsConfig,
    LoggingConfig,
)

__all__ = [
    # Config models
    "ComplianceConfig",
    "EditionConfig",
    "FlagsConfig",
    "LoggingConfig",
    "LoggingComponentsConfig",
    "APIConfig",
    "AdvisorConfig",
    "DEFAULT_PREMIUM_MODULE",
    # Loader
    "ConfigLoader",
    "get_config_loader",
    # Utilities
    "resolve_env_vars",
    "parse_bool",
]

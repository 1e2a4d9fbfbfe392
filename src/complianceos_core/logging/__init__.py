"""ComplianceOS logging - colored or JSON component logging."""

from .colors import COMPONENT_COLORS, RESET
from .logger import (
    COMPONENTS,
    CapabilityLogger,
    ComplianceLogger,
    EditionLogger,
    FlagLogger,
    LogConfig,
    RegistryLogger,
)

__all__ = [
    "ComplianceLogger",
    "EditionLogger",
    "RegistryLogger",
    "FlagLogger",
    "CapabilityLogger",
    "LogConfig",
    "COMPONENTS",
    "COMPONENT_COLORS",
    "RESET",
]

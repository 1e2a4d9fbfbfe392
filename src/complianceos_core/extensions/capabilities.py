"""Capabilities report.

Tells clients which edition is running, which capabilities a tenant has
and which slots are populated, so a UI can hide or show upgrade prompts
without probing endpoints.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from complianceos_core.editions import get_edition
from complianceos_core.extensions.feature_flags import get_flag_resolver
from complianceos_core.extensions.gate import PREMIUM_CAPABILITIES
from complianceos_core.extensions.registry import SlotRegistry


@dataclass
class Capabilities:
    """
    Capabilities response.

    Returned by GET /api/v1/capabilities.
    """

    edition: str  # "core" or "premium"
    version: str
    features: dict[str, bool] = field(default_factory=dict)
    slots: dict[str, int] = field(default_factory=dict)
    limits: dict[str, Any] = field(default_factory=dict)
    tenant_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result = {
            "edition": self.edition,
            "version": self.version,
            "features": self.features,
            "slots": self.slots,
            "limits": self.limits,
        }
        if self.tenant_id is not None:
            result["tenant_id"] = self.tenant_id
        return result


class CapabilitiesProvider(Protocol):
    """Protocol for capabilities providers."""

    def get_capabilities(self, tenant_id: str | None = None) -> Capabilities:
        """Return capabilities, for one tenant or for the defaults."""
        ...


class DefaultCapabilitiesProvider:
    """
    Capabilities from the process edition, flag resolver and slot registry.

    Premium capabilities are reported false in the core edition regardless
    of flags.
    """

    def __init__(self, version: str | None = None) -> None:
        if version is None:
            from complianceos_core import __version__

            version = __version__
        self._version = version

    def get_capabilities(self, tenant_id: str | None = None) -> Capabilities:
        edition = get_edition()
        resolver = get_flag_resolver()
        flags = resolver.get_flags(tenant_id) if tenant_id is not None else resolver.defaults

        features = {
            name: enabled and (edition.is_premium or name not in PREMIUM_CAPABILITIES)
            for name, enabled in flags.to_dict().items()
        }

        return Capabilities(
            edition=edition.edition.value,
            version=self._version,
            features=features,
            slots=SlotRegistry.get().counts(),
            limits={"premium_capabilities": sorted(PREMIUM_CAPABILITIES)},
            tenant_id=None if tenant_id is None else str(tenant_id),
        )


# Global provider (replaceable at startup)
_capabilities_provider: CapabilitiesProvider | None = None


def get_capabilities_provider() -> CapabilitiesProvider:
    """Get the current capabilities provider."""
    global _capabilities_provider
    if _capabilities_provider is None:
        _capabilities_provider = DefaultCapabilitiesProvider()
    return _capabilities_provider


def set_capabilities_provider(provider: CapabilitiesProvider) -> None:
    """Set the capabilities provider (called at startup)."""
    global _capabilities_provider
    _capabilities_provider = provider


def reset_capabilities_provider() -> None:
    """Reset the capabilities provider (for testing)."""
    global _capabilities_provider
    _capabilities_provider = None

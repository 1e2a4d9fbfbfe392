"""Per-tenant feature flags.

Defaults are fixed at deploy time. Administrators override individual
capabilities per tenant at runtime; overrides live in process memory.
"""

import threading
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any

from complianceos_core.errors import create_error
from complianceos_core.logging import ComplianceLogger


@dataclass(frozen=True)
class FeatureFlags:
    """
    Effective capability switches for one tenant.

    Every field is a capability name. Instances are immutable; merging an
    override produces a new instance.
    """

    ai_advisor: bool = False
    risk_auto_triage: bool = False
    control_suggestions: bool = False
    questionnaire_ai: bool = False
    adversary_intel: bool = False
    vendor_management: bool = False
    custom_frameworks: bool = False
    evidence_automation: bool = False

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)

    def merged(self, override: Mapping[str, bool]) -> "FeatureFlags":
        """Return these flags with ``override`` applied per key."""
        return replace(self, **override)


class Capability(str, Enum):
    """Names of the capabilities carried by FeatureFlags."""

    AI_ADVISOR = "ai_advisor"
    RISK_AUTO_TRIAGE = "risk_auto_triage"
    CONTROL_SUGGESTIONS = "control_suggestions"
    QUESTIONNAIRE_AI = "questionnaire_ai"
    ADVERSARY_INTEL = "adversary_intel"
    VENDOR_MANAGEMENT = "vendor_management"
    CUSTOM_FRAMEWORKS = "custom_frameworks"
    EVIDENCE_AUTOMATION = "evidence_automation"


CAPABILITY_NAMES: frozenset[str] = frozenset(f.name for f in fields(FeatureFlags))

TenantId = str | int


def _tenant_key(tenant_id: TenantId) -> str:
    return str(tenant_id)


def _capability_name(capability: Capability | str) -> str:
    return capability.value if isinstance(capability, Capability) else str(capability)


def validate_partial(partial: Mapping[str, Any]) -> dict[str, bool]:
    """Check a partial flag record before it is applied.

    Raises:
        ComplianceError: FLAG_UNKNOWN for a key that is not a capability,
            FLAG_INVALID for a non-boolean value
    """
    checked: dict[str, bool] = {}
    for key, value in partial.items():
        name = _capability_name(key)
        if name not in CAPABILITY_NAMES:
            raise create_error("FLAG_UNKNOWN", capability=name)
        if not isinstance(value, bool):
            raise create_error("FLAG_INVALID", capability=name)
        checked[name] = value
    return checked


class FeatureFlagResolver:
    """
    Resolves effective flags for tenants.

    ``get_flags`` and ``is_enabled`` are total: unknown tenants get the
    defaults and unknown capability names are disabled.
    """

    def __init__(
        self,
        defaults: FeatureFlags | Mapping[str, bool] | None = None,
        overrides: Mapping[TenantId, Mapping[str, bool]] | None = None,
        logger: ComplianceLogger | None = None,
    ) -> None:
        if defaults is None:
            defaults = FeatureFlags()
        elif not isinstance(defaults, FeatureFlags):
            defaults = FeatureFlags(**validate_partial(defaults))

        self._defaults = defaults
        self._overrides: dict[str, dict[str, bool]] = {}
        self._lock = threading.Lock()
        self._logger = logger

        for tenant_id, partial in (overrides or {}).items():
            self._overrides[_tenant_key(tenant_id)] = validate_partial(partial)

    @property
    def defaults(self) -> FeatureFlags:
        return self._defaults

    def get_flags(self, tenant_id: TenantId) -> FeatureFlags:
        """Effective flags: defaults with the tenant's override on top."""
        with self._lock:
            override = self._overrides.get(_tenant_key(tenant_id))
        if not override:
            return self._defaults
        return self._defaults.merged(override)

    def is_enabled(self, tenant_id: TenantId, capability: Capability | str) -> bool:
        name = _capability_name(capability)
        if name not in CAPABILITY_NAMES:
            return False
        return bool(getattr(self.get_flags(tenant_id), name))

    def set_override(self, tenant_id: TenantId, partial: Mapping[str, Any]) -> None:
        """Merge ``partial`` into the tenant's override.

        Only the named keys change. The tenant's entry is replaced as a
        whole, so concurrent readers see either the old or the new record.

        Raises:
            ComplianceError: FLAG_UNKNOWN / FLAG_INVALID; nothing is applied
        """
        changes = validate_partial(partial)
        key = _tenant_key(tenant_id)

        with self._lock:
            current = self._overrides.get(key, {})
            self._overrides[key] = {**current, **changes}

        if self._logger:
            self._logger.flags().override_set(key, changes)

    def get_override(self, tenant_id: TenantId) -> dict[str, bool]:
        """The tenant's explicit override (empty if none)."""
        with self._lock:
            return dict(self._overrides.get(_tenant_key(tenant_id), {}))

    def clear_override(self, tenant_id: TenantId) -> None:
        key = _tenant_key(tenant_id)
        with self._lock:
            removed = self._overrides.pop(key, None)
        if removed is not None and self._logger:
            self._logger.flags().override_cleared(key)

    def list_tenants_with_capability(self, capability: Capability | str) -> list[str]:
        """Tenants whose override explicitly sets ``capability`` to true.

        Only overrides are inspected: a tenant that gets the capability
        from the defaults is not listed.
        """
        name = _capability_name(capability)
        with self._lock:
            return [
                tenant_id
                for tenant_id, override in self._overrides.items()
                if override.get(name) is True
            ]

    def tenants_with_overrides(self) -> list[str]:
        with self._lock:
            return list(self._overrides)


# Global resolver (seeded from config at startup)
_flag_resolver: FeatureFlagResolver | None = None


def get_flag_resolver() -> FeatureFlagResolver:
    """Get the process flag resolver."""
    global _flag_resolver
    if _flag_resolver is None:
        _flag_resolver = FeatureFlagResolver()
    return _flag_resolver


def set_flag_resolver(resolver: FeatureFlagResolver) -> None:
    """Set the process flag resolver (called at startup)."""
    global _flag_resolver
    _flag_resolver = resolver


def reset_flag_resolver() -> None:
    """Reset the flag resolver (for testing)."""
    global _flag_resolver
    _flag_resolver = None


def is_feature_enabled(tenant_id: TenantId, capability: Capability | str) -> bool:
    """Check a capability for a tenant against the process resolver."""
    return get_flag_resolver().is_enabled(tenant_id, capability)

"""Capability gate.

A premium capability is offered to a tenant only when all of these hold:

1. the running edition provides it (the premium module is active),
2. the tenant's flag for it is on,
3. the tenant's plan includes it, when a plan lookup is configured.

Capabilities outside the premium surface are gated by the tenant flag
alone.
"""

from collections.abc import Callable
from dataclasses import dataclass

from complianceos_core.editions import EditionResolution, get_edition
from complianceos_core.errors import create_error
from complianceos_core.extensions.feature_flags import (
    CAPABILITY_NAMES,
    Capability,
    FeatureFlagResolver,
    get_flag_resolver,
)
from complianceos_core.logging import ComplianceLogger
from complianceos_core.premium import SURFACE_CAPABILITIES
from complianceos_core.types import PlanTier, UnavailableReason

TierLookup = Callable[[str], PlanTier | str | None]

PREMIUM_CAPABILITIES: frozenset[str] = frozenset(c.value for c in SURFACE_CAPABILITIES.values())

_REASON_CODES = {
    UnavailableReason.EDITION: "CAPABILITY_UNAVAILABLE",
    UnavailableReason.TENANT: "CAPABILITY_DISABLED",
    UnavailableReason.PLAN: "PLAN_UPGRADE_REQUIRED",
}


@dataclass(frozen=True)
class GateDecision:
    """Outcome of a capability check."""

    capability: str
    tenant_id: str
    reason: UnavailableReason | None = None

    @property
    def allowed(self) -> bool:
        return self.reason is None

    @property
    def code(self) -> str | None:
        return _REASON_CODES[self.reason] if self.reason else None

    def to_dict(self) -> dict[str, object]:
        return {
            "capability": self.capability,
            "tenant_id": self.tenant_id,
            "allowed": self.allowed,
            "reason": self.reason.value if self.reason else None,
            "code": self.code,
        }


class CapabilityGate:
    """Combines edition, tenant flags and plan tier into one decision."""

    def __init__(
        self,
        edition: EditionResolution | None = None,
        flags: FeatureFlagResolver | None = None,
        tier_lookup: TierLookup | None = None,
        logger: ComplianceLogger | None = None,
    ) -> None:
        self._edition = edition
        self._flags = flags
        self._tier_lookup = tier_lookup
        self._logger = logger

    @property
    def edition(self) -> EditionResolution:
        return self._edition or get_edition()

    @property
    def flags(self) -> FeatureFlagResolver:
        return self._flags or get_flag_resolver()

    def check(self, tenant_id: str | int, capability: Capability | str) -> GateDecision:
        """Decide whether ``capability`` is offered to ``tenant_id``.

        Raises:
            ComplianceError: FLAG_UNKNOWN for a name that is not a capability
        """
        name = capability.value if isinstance(capability, Capability) else str(capability)
        if name not in CAPABILITY_NAMES:
            raise create_error("FLAG_UNKNOWN", capability=name)

        tenant = str(tenant_id)
        premium = name in PREMIUM_CAPABILITIES

        if premium and not self.edition.is_premium:
            reason: UnavailableReason | None = UnavailableReason.EDITION
        elif not self.flags.is_enabled(tenant, name):
            reason = UnavailableReason.TENANT
        elif premium and not self._plan_allows(tenant):
            reason = UnavailableReason.PLAN
        else:
            reason = None

        decision = GateDecision(capability=name, tenant_id=tenant, reason=reason)
        if reason and self._logger:
            self._logger.capability().unavailable(name, tenant, reason.value)
        return decision

    def require(self, tenant_id: str | int, capability: Capability | str) -> None:
        """Like ``check`` but raises when the capability is not offered.

        Raises:
            CapabilityUnavailableError: with the code matching the reason
        """
        decision = self.check(tenant_id, capability)
        if decision.reason is not None:
            raise create_error(
                _REASON_CODES[decision.reason],
                capability=decision.capability,
                tenant_id=decision.tenant_id,
                reason=decision.reason,
            )

    def _plan_allows(self, tenant_id: str) -> bool:
        if self._tier_lookup is None:
            return True
        tier = self._tier_lookup(tenant_id)
        if tier is None:
            return False
        # Plan tiers are stored as free text; anything unrecognised is denied.
        try:
            return PlanTier(tier).is_premium
        except ValueError:
            return False

"""Extension points for ComplianceOS.

Slots let the premium module inject components into core surfaces; flags
decide per tenant what is offered. The capability gate and capabilities
report depend on the edition and are imported from their own modules:

    from complianceos_core.extensions.gate import CapabilityGate
    from complianceos_core.extensions.capabilities import get_capabilities_provider
"""

from complianceos_core.extensions.consumer import RenderedComponent, Slot, render_slot
from complianceos_core.extensions.feature_flags import (
    CAPABILITY_NAMES,
    Capability,
    FeatureFlagResolver,
    FeatureFlags,
    get_flag_resolver,
    is_feature_enabled,
    reset_flag_resolver,
    set_flag_resolver,
)
from complianceos_core.extensions.registrar import (
    CORE_DEFAULTS,
    Registrar,
    RegistrarHost,
    register_core_defaults,
)
from complianceos_core.extensions.registry import SlotComponent, SlotRegistry
from complianceos_core.extensions.slots import (
    SLOT_CONTRACTS,
    SlotName,
    describe_slots,
    missing_props,
)

__all__ = [
    # Slots
    "SlotName",
    "SLOT_CONTRACTS",
    "describe_slots",
    "missing_props",
    "SlotRegistry",
    "SlotComponent",
    "render_slot",
    "RenderedComponent",
    "Slot",
    # Registrars
    "Registrar",
    "RegistrarHost",
    "CORE_DEFAULTS",
    "register_core_defaults",
    # Feature Flags
    "FeatureFlags",
    "FeatureFlagResolver",
    "Capability",
    "CAPABILITY_NAMES",
    "get_flag_resolver",
    "set_flag_resolver",
    "reset_flag_resolver",
    "is_feature_enabled",
]

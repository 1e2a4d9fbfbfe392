"""ComplianceOS premium module.

Installed alongside ``complianceos_core`` to build the premium edition.
Core code never imports this package directly; it goes through
``complianceos_core.premium``, which the edition resolver points here.
"""

from complianceos_core.extensions.registry import SlotRegistry
from complianceos_premium.components import PREMIUM_COMPONENTS
from complianceos_premium.surface import (
    enhance_section,
    generate_questionnaire_answers,
    suggest_controls,
    triage_risk,
)

__version__ = "1.0.0"


def register_premium(registry: SlotRegistry | None = None) -> None:
    """Register every premium slot component.

    Run once per process by the application's registrar host.
    """
    registry = registry or SlotRegistry.get()
    for slot, component in PREMIUM_COMPONENTS:
        registry.register(slot, component)


__all__ = [
    "__version__",
    "register_premium",
    "enhance_section",
    "triage_risk",
    "suggest_controls",
    "generate_questionnaire_answers",
]

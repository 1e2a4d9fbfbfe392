"""Stable import point for premium capabilities.

Business code imports the premium surface from here and never from
``complianceos_premium`` directly:

    from complianceos_core import premium

    triage = await premium.triage_risk(tenant_id, threat, vulnerability)

Each name resolves through the process edition: the real module when the
premium edition is active, ``complianceos_core.premium.stub`` otherwise.
"""

from typing import TYPE_CHECKING, Any

from complianceos_core.extensions.feature_flags import Capability
from complianceos_core.premium.types import (
    ControlSuggestion,
    EnhancedSection,
    QuestionnaireAnswer,
    RiskTriage,
)

if TYPE_CHECKING:
    from complianceos_core.premium.stub import (
        enhance_section,
        generate_questionnaire_answers,
        suggest_controls,
        triage_risk,
    )

# Public functions both editions must provide, and the capability each serves.
SURFACE_CAPABILITIES: dict[str, Capability] = {
    "enhance_section": Capability.AI_ADVISOR,
    "triage_risk": Capability.RISK_AUTO_TRIAGE,
    "suggest_controls": Capability.CONTROL_SUGGESTIONS,
    "generate_questionnaire_answers": Capability.QUESTIONNAIRE_AI,
}
PREMIUM_SURFACE: tuple[str, ...] = tuple(SURFACE_CAPABILITIES)

# Name of the registrar the premium module exports.
REGISTRAR_NAME = "register_premium"


def __getattr__(name: str) -> Any:
    if name in SURFACE_CAPABILITIES:
        from complianceos_core.editions import get_edition

        return getattr(get_edition().module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Surface
    "enhance_section",
    "triage_risk",
    "suggest_controls",
    "generate_questionnaire_answers",
    # Types
    "EnhancedSection",
    "RiskTriage",
    "ControlSuggestion",
    "QuestionnaireAnswer",
    # Contract
    "SURFACE_CAPABILITIES",
    "PREMIUM_SURFACE",
    "REGISTRAR_NAME",
]

"""Slot components contributed by the premium module.

Each component takes the slot's props and returns a descriptor the client
renders, or None when the tenant does not have the capability it needs.
"""

from typing import Any

from complianceos_core.extensions import Capability, SlotName, get_flag_resolver
from complianceos_core.extensions.registry import SlotComponent


def gated_component(
    component: str, capability: Capability, **static_props: Any
) -> SlotComponent:
    """Build a component that renders only for tenants with ``capability``."""

    def render(props: dict[str, Any]) -> dict[str, Any] | None:
        tenant_id = props.get("tenant_id")
        if tenant_id is None or not get_flag_resolver().is_enabled(tenant_id, capability):
            return None
        return {
            "component": component,
            "capability": capability.value,
            "props": {**props, **static_props},
        }

    render.__name__ = render.__qualname__ = component
    return render


PREMIUM_COMPONENTS: list[tuple[SlotName, SlotComponent]] = [
    (SlotName.HEADER_COPILOT, gated_component("AdvisorCopilotLauncher", Capability.AI_ADVISOR)),
    (SlotName.RISK_AUTO_TRIAGE, gated_component("RiskAutoTriage", Capability.RISK_AUTO_TRIAGE)),
    (
        SlotName.RISK_CONTROL_SUGGESTION,
        gated_component("ControlSuggestionPanel", Capability.CONTROL_SUGGESTIONS),
    ),
    (
        SlotName.RISK_REPORT_AI_BUTTON,
        gated_component("SectionEnhanceButton", Capability.AI_ADVISOR, document="risk-report"),
    ),
    (
        SlotName.RISK_REPORT_GENERATE_ALL,
        gated_component("GenerateAllSectionsButton", Capability.AI_ADVISOR),
    ),
    (
        SlotName.GAP_ANALYSIS_AI_BUTTON,
        gated_component("GapAnalysisAssistButton", Capability.AI_ADVISOR),
    ),
    (
        SlotName.POLICY_RISK_SUGGESTION,
        gated_component("PolicyLinkSuggestion", Capability.AI_ADVISOR, target="risks"),
    ),
    (
        SlotName.POLICY_CONTROL_SUGGESTION,
        gated_component("PolicyLinkSuggestion", Capability.CONTROL_SUGGESTIONS, target="controls"),
    ),
    (
        SlotName.EVIDENCE_TOOLBAR_ACTIONS,
        gated_component("EvidenceCollectorButton", Capability.EVIDENCE_AUTOMATION),
    ),
    (
        SlotName.BC_PLAN_SECTION_ACTIONS,
        gated_component("SectionEnhanceButton", Capability.AI_ADVISOR, document="bc-plan"),
    ),
]

"""Slot catalog.

Every extension point a core surface offers is declared here, once. Core
call sites and registrars reference ``SlotName`` members, never literal
strings, so renaming or removing a slot is a single change that type
checkers and the registry both catch.

Each slot has a ``TypedDict`` describing the props every component placed
in it receives.
"""

from enum import Enum
from typing import Any, TypedDict

from complianceos_core.errors import create_error


class SlotName(str, Enum):
    """Closed set of extension slot identifiers."""

    # Generic page toolbar, right-aligned action buttons.
    # Props: ToolbarActionsProps
    TOOLBAR_ACTIONS = "toolbar-actions"

    # Generic sidebar, stacked widgets below navigation.
    # Props: SidebarWidgetsProps
    SIDEBAR_WIDGETS = "sidebar-widgets"

    # Application header, next to the user menu (advisor copilot launcher).
    # Props: HeaderCopilotProps
    HEADER_COPILOT = "header-copilot"

    # Risk wizard and register, below the threat/vulnerability fields.
    # Props: RiskAutoTriageProps
    RISK_AUTO_TRIAGE = "risk-auto-triage"

    # Risk details, treatment section; proposes mitigating controls.
    # Props: RiskControlSuggestionProps
    RISK_CONTROL_SUGGESTION = "risk-control-suggestion"

    # Risk report editor, beside each narrative section heading.
    # Props: RiskReportAIButtonProps
    RISK_REPORT_AI_BUTTON = "risk-report-ai-button"

    # Risk report editor toolbar; drafts every section at once.
    # Props: RiskReportGenerateAllProps
    RISK_REPORT_GENERATE_ALL = "risk-report-generate-all"

    # Gap analysis control card, next to the status selector.
    # Props: GapAnalysisAIButtonProps
    GAP_ANALYSIS_AI_BUTTON = "gap-analysis-ai-button"

    # Policy editor, linked risks panel.
    # Props: PolicySuggestionProps
    POLICY_RISK_SUGGESTION = "policy-risk-suggestion"

    # Policy editor, linked controls panel.
    # Props: PolicySuggestionProps
    POLICY_CONTROL_SUGGESTION = "policy-control-suggestion"

    # Control details header, after the built-in actions.
    # Props: ControlActionsProps
    CONTROL_HEADER_ACTIONS = "control-header-actions"

    # Control edit form footer.
    # Props: ControlActionsProps
    CONTROL_EDIT_ACTIONS = "control-edit-actions"

    # Evidence library toolbar.
    # Props: EvidenceToolbarProps
    EVIDENCE_TOOLBAR_ACTIONS = "evidence-toolbar-actions"

    # Business continuity plan editor, per-section action row.
    # Props: BCPlanSectionProps
    BC_PLAN_SECTION_ACTIONS = "bc-plan-section-actions"

    @classmethod
    def coerce(cls, value: "SlotName | str") -> "SlotName":
        """Return the catalog member for ``value``.

        Raises:
            ComplianceError: SLOT_UNKNOWN if ``value`` is not in the catalog
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise create_error("SLOT_UNKNOWN", slot=value) from None


class ToolbarActionsProps(TypedDict, total=False):
    tenant_id: str
    page: str


class SidebarWidgetsProps(TypedDict, total=False):
    tenant_id: str
    route: str


class HeaderCopilotProps(TypedDict, total=False):
    tenant_id: str
    user_name: str


class RiskAutoTriageProps(TypedDict, total=False):
    tenant_id: str
    threat: str
    vulnerability: str
    affected_assets: list[str]


class RiskControlSuggestionProps(TypedDict, total=False):
    tenant_id: str
    threat: str
    vulnerability: str
    selected_control_ids: list[int]


class RiskReportAIButtonProps(TypedDict, total=False):
    tenant_id: str
    section_field: str
    section_name: str
    prompt: str


class RiskReportGenerateAllProps(TypedDict, total=False):
    tenant_id: str
    report_id: int
    sections: list[str]


class GapAnalysisAIButtonProps(TypedDict, total=False):
    tenant_id: str
    control_id: int
    control_name: str
    description: str
    framework: str
    current_status: str
    notes: str


class PolicySuggestionProps(TypedDict, total=False):
    tenant_id: str
    content: str
    available_ids: list[int]
    linked_ids: list[int]


class ControlActionsProps(TypedDict, total=False):
    tenant_id: str
    control_id: int
    control_name: str


class EvidenceToolbarProps(TypedDict, total=False):
    tenant_id: str
    folder: str


class BCPlanSectionProps(TypedDict, total=False):
    tenant_id: str
    plan_id: int
    section_key: str
    content: str


SLOT_CONTRACTS: dict[SlotName, type] = {
    SlotName.TOOLBAR_ACTIONS: ToolbarActionsProps,
    SlotName.SIDEBAR_WIDGETS: SidebarWidgetsProps,
    SlotName.HEADER_COPILOT: HeaderCopilotProps,
    SlotName.RISK_AUTO_TRIAGE: RiskAutoTriageProps,
    SlotName.RISK_CONTROL_SUGGESTION: RiskControlSuggestionProps,
    SlotName.RISK_REPORT_AI_BUTTON: RiskReportAIButtonProps,
    SlotName.RISK_REPORT_GENERATE_ALL: RiskReportGenerateAllProps,
    SlotName.GAP_ANALYSIS_AI_BUTTON: GapAnalysisAIButtonProps,
    SlotName.POLICY_RISK_SUGGESTION: PolicySuggestionProps,
    SlotName.POLICY_CONTROL_SUGGESTION: PolicySuggestionProps,
    SlotName.CONTROL_HEADER_ACTIONS: ControlActionsProps,
    SlotName.CONTROL_EDIT_ACTIONS: ControlActionsProps,
    SlotName.EVIDENCE_TOOLBAR_ACTIONS: EvidenceToolbarProps,
    SlotName.BC_PLAN_SECTION_ACTIONS: BCPlanSectionProps,
}

# Keys every slot contract requires.
REQUIRED_PROPS = ("tenant_id",)


def missing_props(slot: SlotName | str, props: dict[str, Any]) -> list[str]:
    """Required contract keys absent from ``props``."""
    SlotName.coerce(slot)
    return [key for key in REQUIRED_PROPS if key not in props]


def describe_slots() -> list[dict[str, Any]]:
    """Catalog listing used by the slots API."""
    return [
        {
            "slot": slot.value,
            "contract": SLOT_CONTRACTS[slot].__name__,
            "props": sorted(SLOT_CONTRACTS[slot].__annotations__),
            "required": list(REQUIRED_PROPS),
        }
        for slot in SlotName
    ]

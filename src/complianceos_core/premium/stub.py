"""Core-edition stand-ins for the premium surface.

Same names and signatures as ``complianceos_premium``. Every call fails
with CAPABILITY_UNAVAILABLE so callers can show an upgrade prompt instead
of treating the result as empty data.
"""

from complianceos_core.errors import ComplianceError, create_error
from complianceos_core.extensions.feature_flags import Capability
from complianceos_core.premium.types import (
    ControlSuggestion,
    EnhancedSection,
    QuestionnaireAnswer,
    RiskTriage,
)
from complianceos_core.types import UnavailableReason


def _unavailable(capability: Capability, tenant_id: str) -> ComplianceError:
    return create_error(
        "CAPABILITY_UNAVAILABLE",
        capability=capability.value,
        tenant_id=tenant_id,
        reason=UnavailableReason.EDITION,
    )


async def enhance_section(tenant_id: str, section_key: str, content: str) -> EnhancedSection:
    raise _unavailable(Capability.AI_ADVISOR, tenant_id)


async def triage_risk(
    tenant_id: str,
    threat: str,
    vulnerability: str,
    affected_assets: list[str] | None = None,
) -> RiskTriage:
    raise _unavailable(Capability.RISK_AUTO_TRIAGE, tenant_id)


async def suggest_controls(
    tenant_id: str, threat: str, vulnerability: str
) -> list[ControlSuggestion]:
    raise _unavailable(Capability.CONTROL_SUGGESTIONS, tenant_id)


async def generate_questionnaire_answers(
    tenant_id: str, questions: list[str]
) -> list[QuestionnaireAnswer]:
    raise _unavailable(Capability.QUESTIONNAIRE_AI, tenant_id)

"""Premium implementations of the advisor-backed capabilities.

Signatures must stay identical to ``complianceos_core.premium.stub``; the
edition resolver refuses to load this module otherwise.
"""

from typing import Any

from complianceos_core.errors import ComplianceError, create_error
from complianceos_core.premium.types import (
    ControlSuggestion,
    EnhancedSection,
    QuestionnaireAnswer,
    RiskTriage,
)
from complianceos_premium.advisor import get_advisor_client


def _malformed(operation: str, tenant_id: str, error: Exception) -> ComplianceError:
    return create_error(
        "ADVISOR_REQUEST_FAILED",
        capability=operation,
        tenant_id=tenant_id,
        detail=f"Malformed advisor response: {error}",
    )


def _score(value: Any) -> int:
    """Clamp an advisor score into the 1-5 scale."""
    return max(1, min(5, int(value)))


async def enhance_section(tenant_id: str, section_key: str, content: str) -> EnhancedSection:
    data = await get_advisor_client().call(
        "enhance-section", tenant_id, {"section_key": section_key, "content": content}
    )
    enhanced = data.get("content")
    if not isinstance(enhanced, str):
        raise _malformed("enhance-section", tenant_id, TypeError("content is not a string"))
    return EnhancedSection(section_key=section_key, content=enhanced)


async def triage_risk(
    tenant_id: str,
    threat: str,
    vulnerability: str,
    affected_assets: list[str] | None = None,
) -> RiskTriage:
    data = await get_advisor_client().call(
        "triage-risk",
        tenant_id,
        {
            "threat": threat,
            "vulnerability": vulnerability,
            "affected_assets": affected_assets or [],
        },
    )
    try:
        return RiskTriage(
            likelihood=_score(data["likelihood"]),
            impact=_score(data["impact"]),
            rationale=str(data.get("rationale", "")),
            recommended_treatment=data.get("recommended_treatment"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise _malformed("triage-risk", tenant_id, e) from e


async def suggest_controls(
    tenant_id: str, threat: str, vulnerability: str
) -> list[ControlSuggestion]:
    data = await get_advisor_client().call(
        "suggest-controls", tenant_id, {"threat": threat, "vulnerability": vulnerability}
    )
    try:
        return [
            ControlSuggestion(
                control_id=int(item["control_id"]),
                name=str(item.get("name", "")),
                rationale=str(item.get("rationale", "")),
            )
            for item in data.get("suggestions", [])
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise _malformed("suggest-controls", tenant_id, e) from e


async def generate_questionnaire_answers(
    tenant_id: str, questions: list[str]
) -> list[QuestionnaireAnswer]:
    if not questions:
        return []

    data = await get_advisor_client().call(
        "questionnaire-answers", tenant_id, {"questions": questions}
    )
    try:
        return [
            QuestionnaireAnswer(
                question=str(item["question"]),
                answer=str(item.get("answer", "")),
                confidence=float(item.get("confidence", 0.0)),
                sources=[str(source) for source in item.get("sources", [])],
            )
            for item in data.get("answers", [])
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise _malformed("questionnaire-answers", tenant_id, e) from e

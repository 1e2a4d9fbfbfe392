"""Advisor router.

Every route checks the capability gate, then calls the premium surface
through the facade. In the core edition the gate refuses first; the stub
behind the facade would refuse the same way.
"""

from typing import Any

from fastapi import APIRouter, Request

from complianceos_core import premium
from complianceos_core.api.models import (
    EnhanceSectionRequest,
    QuestionnaireRequest,
    SuggestControlsRequest,
    TriageRiskRequest,
)
from complianceos_core.extensions import Capability

advisor_router = APIRouter(prefix="/advisor", tags=["Advisor"])


@advisor_router.post("/enhance")
async def enhance_section(body: EnhanceSectionRequest, request: Request) -> dict[str, Any]:
    request.app.state.gate.require(body.tenant_id, Capability.AI_ADVISOR)
    result = await premium.enhance_section(body.tenant_id, body.section_key, body.content)
    return result.to_dict()


@advisor_router.post("/triage")
async def triage_risk(body: TriageRiskRequest, request: Request) -> dict[str, Any]:
    request.app.state.gate.require(body.tenant_id, Capability.RISK_AUTO_TRIAGE)
    result = await premium.triage_risk(
        body.tenant_id, body.threat, body.vulnerability, body.affected_assets
    )
    return result.to_dict()


@advisor_router.post("/controls")
async def suggest_controls(body: SuggestControlsRequest, request: Request) -> dict[str, Any]:
    request.app.state.gate.require(body.tenant_id, Capability.CONTROL_SUGGESTIONS)
    suggestions = await premium.suggest_controls(body.tenant_id, body.threat, body.vulnerability)
    return {"suggestions": [s.to_dict() for s in suggestions]}


@advisor_router.post("/questionnaire")
async def answer_questionnaire(body: QuestionnaireRequest, request: Request) -> dict[str, Any]:
    request.app.state.gate.require(body.tenant_id, Capability.QUESTIONNAIRE_AI)
    answers = await premium.generate_questionnaire_answers(body.tenant_id, body.questions)
    return {"answers": [a.to_dict() for a in answers]}

"""Advisor request models."""

from pydantic import BaseModel, Field


class EnhanceSectionRequest(BaseModel):
    tenant_id: str
    section_key: str
    content: str


class TriageRiskRequest(BaseModel):
    tenant_id: str
    threat: str
    vulnerability: str
    affected_assets: list[str] = Field(default_factory=list)


class SuggestControlsRequest(BaseModel):
    tenant_id: str
    threat: str
    vulnerability: str


class QuestionnaireRequest(BaseModel):
    tenant_id: str
    questions: list[str] = Field(..., min_length=1)

"""REST API Pydantic models."""

from .advisor import (
    EnhanceSectionRequest,
    QuestionnaireRequest,
    SuggestControlsRequest,
    TriageRiskRequest,
)
from .common import ErrorDetail, ErrorResponse, HealthCheck, HealthStatus
from .flags import CapabilityTenantsResponse, FlagOverrideRequest, TenantFlagsResponse
from .slots import (
    RenderedChild,
    RenderRequest,
    RenderResponse,
    SlotInfo,
    SlotListResponse,
)

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    "HealthCheck",
    "HealthStatus",
    # Flags
    "FlagOverrideRequest",
    "TenantFlagsResponse",
    "CapabilityTenantsResponse",
    # Slots
    "SlotInfo",
    "SlotListResponse",
    "RenderRequest",
    "RenderedChild",
    "RenderResponse",
    # Advisor
    "EnhanceSectionRequest",
    "TriageRiskRequest",
    "SuggestControlsRequest",
    "QuestionnaireRequest",
]

"""Common REST API models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel

# ─────────────────────────────────────────────────────────────────
# Error Response
# ─────────────────────────────────────────────────────────────────


class ErrorDetail(BaseModel):
    """Error detail model (matches the error registry)."""

    code: str
    category: str
    message: str
    detail: str | None = None
    suggestion: str | None = None
    reason: str | None = None
    request_id: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail


# ─────────────────────────────────────────────────────────────────
# Health
# ─────────────────────────────────────────────────────────────────


class HealthStatus(str, Enum):
    """Health status enum."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"


class HealthCheck(BaseModel):
    """Health check response."""

    status: HealthStatus
    edition: str
    checks: dict[str, str]
    timestamp: datetime

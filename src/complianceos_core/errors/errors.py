"""ComplianceOS error types."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from complianceos_core.types import UnavailableReason


class ErrorCategory(str, Enum):
    """Error source categories."""

    CONFIG = "CONFIG"
    EDITION = "EDITION"
    CAPABILITY = "CAPABILITY"
    VALIDATION = "VALIDATION"
    SYSTEM = "SYSTEM"


@dataclass
class ComplianceError(Exception):
    """Structured error with context. Base exception for all ComplianceOS errors."""

    # Identity
    code: str  # e.g., "CAPABILITY_UNAVAILABLE"
    category: ErrorCategory

    # Messages
    message: str  # Human-readable summary
    detail: str | None = None  # Extended explanation
    suggestion: str | None = None  # Actionable fix

    # Context
    retryable: bool = False
    http_status: int = 500  # For REST API responses
    tenant_id: str | None = None
    capability: str | None = None
    slot: str | None = None

    cause: "ComplianceError | None" = None

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "retryable": self.retryable,
            "tenant_id": self.tenant_id,
            "capability": self.capability,
            "slot": self.slot,
            "timestamp": self.timestamp.isoformat(),
            "cause": self.cause.to_dict() if self.cause else None,
        }


@dataclass
class CapabilityUnavailableError(ComplianceError):
    """A capability exists in the contract but cannot be offered.

    Expected and recoverable: callers render an upgrade/unavailable
    affordance instead of treating it as a backend failure.
    """

    reason: UnavailableReason = UnavailableReason.EDITION

    @property
    def is_edition_limitation(self) -> bool:
        """True when the running edition lacks the implementation."""
        return self.reason == UnavailableReason.EDITION

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["reason"] = self.reason.value
        return result


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    code: str
    category: ErrorCategory
    message_template: str  # "Capability '{capability}' is not available"
    detail_template: str | None = None
    suggestion_template: str | None = None
    default_retryable: bool = False
    default_http_status: int = 500

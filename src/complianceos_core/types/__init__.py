"""Shared types for ComplianceOS core.

Import from here rather than submodules:
    from complianceos_core.types import Edition, LogLevel, ValidationResult
"""

from .enums import Edition, LogFormat, LogLevel, PlanTier, UnavailableReason
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "LogLevel",
    "LogFormat",
    "Edition",
    "PlanTier",
    "UnavailableReason",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]

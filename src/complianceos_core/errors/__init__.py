"""ComplianceOS error handling - structured errors with context."""

from .errors import CapabilityUnavailableError, ComplianceError, ErrorCategory, ErrorTemplate
from .factory import ErrorFactory, create_error, get_error_factory
from .registry import ErrorRegistry

__all__ = [
    # Core error types
    "ComplianceError",
    "CapabilityUnavailableError",
    "ErrorCategory",
    "ErrorTemplate",
    # Registry and factory
    "ErrorRegistry",
    "ErrorFactory",
    # Convenience functions
    "get_error_factory",
    "create_error",
]

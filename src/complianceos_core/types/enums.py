"""Shared enumerations for ComplianceOS core."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    COLORED = "colored"
    JSON = "json"


class Edition(str, Enum):
    """Product edition selected by the edition resolver."""

    CORE = "core"
    PREMIUM = "premium"


class PlanTier(str, Enum):
    """Commercial plan of a tenant."""

    FREE = "free"
    STARTUP = "startup"
    PRO = "pro"
    ENTERPRISE = "enterprise"

    @property
    def is_premium(self) -> bool:
        """Whether this tier unlocks premium capabilities."""
        return self in (PlanTier.PRO, PlanTier.ENTERPRISE)


class UnavailableReason(str, Enum):
    """Why a capability cannot be offered to a tenant."""

    EDITION = "edition"
    TENANT = "tenant"
    PLAN = "plan"

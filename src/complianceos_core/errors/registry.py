"""Error registry for creating errors from templates."""

from typing import Any

from complianceos_core.types import UnavailableReason

from .errors import CapabilityUnavailableError, ComplianceError, ErrorCategory, ErrorTemplate


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, code: str) -> ErrorTemplate | None:
        """Get template by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[str]:
        """List all registered error codes.

        Returns:
            List of error codes
        """
        return list(self._templates.keys())

    def register(self, template: ErrorTemplate) -> None:
        """Add or replace a template (used by optional modules)."""
        self._templates[template.code] = template

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
        cause: ComplianceError | None = None,
    ) -> ComplianceError:
        """Create error instance from template + context.

        An explicit ``detail`` in the context replaces the template detail.

        Args:
            code: Error code
            context: Context variables for template interpolation
            cause: Optional cause error

        Returns:
            ComplianceError instance (CapabilityUnavailableError for the
            CAPABILITY category)

        Raises:
            ValueError: If error code not found
        """
        template = self.get_template(code)
        if not template:
            msg = f"Unknown error code: {code}"
            raise ValueError(msg)

        context = context or {}

        message = self._interpolate(template.message_template, context)
        detail = context.get("detail") or self._interpolate(template.detail_template, context)
        suggestion = self._interpolate(template.suggestion_template, context)

        if message is None:
            message = f"Error {code}"

        kwargs: dict[str, Any] = {
            "code": template.code,
            "category": template.category,
            "message": message,
            "detail": detail,
            "suggestion": suggestion,
            "retryable": template.default_retryable,
            "http_status": template.default_http_status,
            "tenant_id": _optional_str(context.get("tenant_id")),
            "capability": _optional_str(context.get("capability")),
            "slot": _optional_str(context.get("slot")),
            "cause": cause,
        }

        if template.category == ErrorCategory.CAPABILITY:
            reason = context.get("reason", UnavailableReason.EDITION)
            return CapabilityUnavailableError(reason=UnavailableReason(reason), **kwargs)

        return ComplianceError(**kwargs)

    def _interpolate(
        self,
        template: str | None,
        context: dict[str, Any],
    ) -> str | None:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string or None if template is None
        """
        if template is None:
            return None

        try:
            return template.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        # CONFIG Errors
        self._templates["CONFIG_INVALID"] = ErrorTemplate(
            code="CONFIG_INVALID",
            category=ErrorCategory.CONFIG,
            message_template="Invalid configuration",
            detail_template="The ComplianceOS configuration is invalid",
            suggestion_template="Check the configuration file and fix errors",
            default_http_status=500,
        )

        self._templates["SLOT_UNKNOWN"] = ErrorTemplate(
            code="SLOT_UNKNOWN",
            category=ErrorCategory.CONFIG,
            message_template="Unknown extension slot '{slot}'",
            detail_template="Slot identifiers must be declared in the SlotName catalog",
            suggestion_template="Use a SlotName member instead of a literal string",
            default_http_status=500,
        )

        # EDITION Errors
        self._templates["EDITION_SHAPE_MISMATCH"] = ErrorTemplate(
            code="EDITION_SHAPE_MISMATCH",
            category=ErrorCategory.EDITION,
            message_template="Module '{module}' does not match the premium surface",
            detail_template="The installed module's public surface differs from the stub",
            suggestion_template="Upgrade the optional module to a version built for this core",
            default_http_status=500,
        )

        self._templates["EDITION_LOAD_FAILED"] = ErrorTemplate(
            code="EDITION_LOAD_FAILED",
            category=ErrorCategory.EDITION,
            message_template="Module '{module}' is present but failed to import",
            suggestion_template=(
                "Fix the module or force-disable it with COMPLIANCEOS_DISABLE_PREMIUM=true"
            ),
            default_http_status=500,
        )

        self._templates["EDITION_ALREADY_RESOLVED"] = ErrorTemplate(
            code="EDITION_ALREADY_RESOLVED",
            category=ErrorCategory.EDITION,
            message_template="Edition already resolved as '{edition}'",
            detail_template="The edition is decided once per process before serving requests",
            suggestion_template="Configure the edition before first use of the premium facade",
            default_http_status=500,
        )

        # VALIDATION Errors
        self._templates["FLAG_UNKNOWN"] = ErrorTemplate(
            code="FLAG_UNKNOWN",
            category=ErrorCategory.VALIDATION,
            message_template="Unknown capability flag '{capability}'",
            suggestion_template="Use one of the Capability names",
            default_http_status=400,
        )

        self._templates["FLAG_INVALID"] = ErrorTemplate(
            code="FLAG_INVALID",
            category=ErrorCategory.VALIDATION,
            message_template="Flag '{capability}' must be a boolean",
            default_http_status=400,
        )

        self._templates["SLOT_PROPS_INVALID"] = ErrorTemplate(
            code="SLOT_PROPS_INVALID",
            category=ErrorCategory.VALIDATION,
            message_template="Props for slot '{slot}' are missing required keys",
            default_http_status=422,
        )

        # CAPABILITY Errors
        self._templates["CAPABILITY_UNAVAILABLE"] = ErrorTemplate(
            code="CAPABILITY_UNAVAILABLE",
            category=ErrorCategory.CAPABILITY,
            message_template="'{capability}' is not available in this edition",
            detail_template="The premium module is not installed in this distribution",
            suggestion_template="Upgrade to the premium edition to use this feature",
            default_http_status=403,
        )

        self._templates["CAPABILITY_DISABLED"] = ErrorTemplate(
            code="CAPABILITY_DISABLED",
            category=ErrorCategory.CAPABILITY,
            message_template="'{capability}' is not enabled for this tenant",
            suggestion_template="Ask an administrator to enable the feature",
            default_http_status=403,
        )

        self._templates["PLAN_UPGRADE_REQUIRED"] = ErrorTemplate(
            code="PLAN_UPGRADE_REQUIRED",
            category=ErrorCategory.CAPABILITY,
            message_template="'{capability}' requires a Pro or Enterprise subscription",
            suggestion_template="Upgrade the tenant's plan to access this feature",
            default_http_status=412,
        )

        # SYSTEM Errors
        self._templates["ADVISOR_REQUEST_FAILED"] = ErrorTemplate(
            code="ADVISOR_REQUEST_FAILED",
            category=ErrorCategory.SYSTEM,
            message_template="Advisor request for '{capability}' failed",
            suggestion_template="Check the advisor endpoint and retry",
            default_retryable=True,
            default_http_status=502,
        )


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)

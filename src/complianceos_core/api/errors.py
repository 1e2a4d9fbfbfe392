"""REST API error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from complianceos_core.api.middleware.request_id import get_request_id
from complianceos_core.errors import CapabilityUnavailableError, ComplianceError

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI) -> None:
    """Configure error handlers for the FastAPI app."""

    @app.exception_handler(ComplianceError)
    async def compliance_error_handler(request: Request, exc: ComplianceError) -> JSONResponse:
        """Handle structured errors.

        An unavailable capability is an expected outcome, already logged by
        the capability gate; it is returned so the client can show an
        upgrade prompt.
        """
        if not isinstance(exc, CapabilityUnavailableError) and exc.http_status >= 500:
            logger.error("%s: %s", exc.code, exc.message, exc_info=exc)

        error_dict = exc.to_dict()
        error_dict["request_id"] = get_request_id()

        return JSONResponse(
            status_code=exc.http_status,
            content={"error": error_dict},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": f"HTTP_{exc.status_code}",
                    "category": "SYSTEM",
                    "message": str(exc.detail),
                    "request_id": get_request_id(),
                }
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        errors = exc.errors()
        first_error = errors[0] if errors else {"msg": "Validation error"}

        return JSONResponse(
            status_code=422,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "category": "VALIDATION",
                    "message": first_error.get("msg", "Validation error"),
                    "detail": str(errors),
                    "request_id": get_request_id(),
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error("Unhandled error", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "category": "SYSTEM",
                    "message": "An unexpected error occurred",
                    "detail": str(exc) if app.debug else None,
                    "request_id": get_request_id(),
                }
            },
        )

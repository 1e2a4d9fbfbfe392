"""ComplianceOS REST API."""

from .app import create_app
from .errors import setup_error_handlers
from .middleware import RequestIDMiddleware, get_request_id

__all__ = [
    "create_app",
    "setup_error_handlers",
    "RequestIDMiddleware",
    "get_request_id",
]

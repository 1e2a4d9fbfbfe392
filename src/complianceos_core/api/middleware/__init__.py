"""REST API middleware."""

from .request_id import REQUEST_ID_HEADER, RequestIDMiddleware, get_request_id

__all__ = [
    "RequestIDMiddleware",
    "REQUEST_ID_HEADER",
    "get_request_id",
]

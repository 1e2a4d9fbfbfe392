"""REST API routers."""

from .advisor import advisor_router
from .capabilities import router as capabilities_router
from .flags import flag_router
from .health import health_router
from .slots import slot_router

__all__ = [
    "capabilities_router",
    "health_router",
    "slot_router",
    "flag_router",
    "advisor_router",
]

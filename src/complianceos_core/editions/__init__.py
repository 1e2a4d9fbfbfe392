"""Edition resolution - core vs premium, decided once per process."""

from .contract import find_shape_problems, verify_shape
from .resolver import (
    DISABLE_ENV_VAR,
    EditionResolution,
    configure_edition,
    disabled_from_env,
    get_edition,
    is_edition_configured,
    module_present,
    reset_edition,
    resolve_edition,
)

__all__ = [
    # Resolution
    "EditionResolution",
    "resolve_edition",
    "configure_edition",
    "get_edition",
    "is_edition_configured",
    "reset_edition",
    # Inputs
    "module_present",
    "disabled_from_env",
    "DISABLE_ENV_VAR",
    # Shape verification
    "verify_shape",
    "find_shape_problems",
]

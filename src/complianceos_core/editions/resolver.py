"""Edition resolver.

Decides once per process, before anything is served, whether the premium
surface is backed by the installed ``complianceos_premium`` module or by
the core stub:

    premium  <=>  module importable  AND NOT  force-disabled

The force-disable switch comes from ``edition.disable_premium`` in the
config file or the ``COMPLIANCEOS_DISABLE_PREMIUM`` environment variable;
the environment variable wins when set. Without either, the module's
presence decides.
"""

import importlib
import importlib.util
import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from complianceos_core.config.loader import parse_bool
from complianceos_core.config.models import DEFAULT_PREMIUM_MODULE, EditionConfig
from complianceos_core.editions.contract import verify_shape
from complianceos_core.errors import ComplianceError, create_error
from complianceos_core.extensions.registrar import Registrar
from complianceos_core.logging import ComplianceLogger
from complianceos_core.premium import REGISTRAR_NAME
from complianceos_core.premium import stub as stub_module
from complianceos_core.types import Edition

logger = logging.getLogger(__name__)

DISABLE_ENV_VAR = "COMPLIANCEOS_DISABLE_PREMIUM"


@dataclass(frozen=True)
class EditionResolution:
    """The edition decision and the module backing the premium surface."""

    edition: Edition
    present: bool
    disabled: bool
    module_name: str
    module: ModuleType
    registrar: Registrar | None = None

    @property
    def is_premium(self) -> bool:
        return self.edition == Edition.PREMIUM

    def to_dict(self) -> dict[str, object]:
        return {
            "edition": self.edition.value,
            "module": self.module_name,
            "present": self.present,
            "disabled": self.disabled,
        }


def module_present(module_name: str) -> bool:
    """Whether the module's source tree can be found, without importing it."""
    try:
        spec = importlib.util.find_spec(module_name)
    except (ImportError, ValueError):
        return False

    if spec is None:
        return False
    if spec.origin and spec.has_location:
        return Path(spec.origin).exists()
    # Namespace packages have no origin, only search locations
    return bool(spec.submodule_search_locations)


def disabled_from_env(environ: Mapping[str, str] | None = None) -> bool | None:
    """Read the force-disable switch from the environment.

    Returns:
        None when the variable is unset or empty

    Raises:
        ComplianceError: CONFIG_INVALID for a value that is not a boolean
    """
    environ = os.environ if environ is None else environ
    value = environ.get(DISABLE_ENV_VAR, "").strip()
    if not value:
        return None
    try:
        return parse_bool(value)
    except ValueError as e:
        raise create_error(
            "CONFIG_INVALID",
            detail=f"{DISABLE_ENV_VAR} must be a boolean, got {value!r}",
        ) from e


def _import_premium(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise create_error("EDITION_LOAD_FAILED", module=module_name, detail=str(e)) from e


def resolve_edition(
    module_name: str = DEFAULT_PREMIUM_MODULE,
    disable: bool | None = None,
    environ: Mapping[str, str] | None = None,
    logger_: ComplianceLogger | None = None,
) -> EditionResolution:
    """Decide the edition and load the module that backs the premium surface.

    Does not record the result; ``configure_edition`` does that.

    Args:
        module_name: Import name of the premium module
        disable: Force-disable switch from configuration
        environ: Environment to read the switch from (defaults to os.environ)
        logger_: Optional ComplianceLogger for the decision

    Raises:
        ComplianceError: EDITION_LOAD_FAILED if the module is present but
            fails to import, EDITION_SHAPE_MISMATCH if its surface differs
            from the stub
    """
    env_disable = disabled_from_env(environ)
    disabled = env_disable if env_disable is not None else bool(disable)
    present = module_present(module_name)

    try:
        if present and not disabled:
            module = _import_premium(module_name)
            verify_shape(module)
            resolution = EditionResolution(
                edition=Edition.PREMIUM,
                present=True,
                disabled=False,
                module_name=module_name,
                module=module,
                registrar=getattr(module, REGISTRAR_NAME),
            )
        else:
            resolution = EditionResolution(
                edition=Edition.CORE,
                present=present,
                disabled=disabled,
                module_name=module_name,
                module=stub_module,
            )
    except ComplianceError as e:
        if logger_:
            logger_.edition().failed(e)
        raise

    logger.debug("Resolved edition %s", resolution.to_dict())
    if logger_:
        logger_.edition().resolved(
            resolution.edition.value, module_name, resolution.present, resolution.disabled
        )
    return resolution


# Process edition, decided once
_edition: EditionResolution | None = None
_edition_lock = threading.Lock()


def configure_edition(
    config: EditionConfig | None = None,
    logger_: ComplianceLogger | None = None,
) -> EditionResolution:
    """Resolve and record the process edition.

    Raises:
        ComplianceError: EDITION_ALREADY_RESOLVED if the edition was already
            decided (including implicitly, by first use of the facade)
    """
    global _edition
    config = config or EditionConfig()

    with _edition_lock:
        if _edition is not None:
            raise create_error("EDITION_ALREADY_RESOLVED", edition=_edition.edition.value)
        _edition = resolve_edition(
            module_name=config.premium_module,
            disable=config.disable_premium,
            logger_=logger_,
        )
        return _edition


def get_edition() -> EditionResolution:
    """The process edition, resolved with defaults on first use."""
    global _edition
    if _edition is None:
        with _edition_lock:
            if _edition is None:
                _edition = resolve_edition()
    return _edition


def is_edition_configured() -> bool:
    return _edition is not None


def reset_edition() -> None:
    """Forget the process edition (for testing)."""
    global _edition
    with _edition_lock:
        _edition = None

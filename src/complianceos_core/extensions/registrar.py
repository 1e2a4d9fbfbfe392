"""Registrar host.

A registrar is the single callable an optional module exports to perform
all of its slot registrations. The host runs each registrar at most once
per process.
"""

import threading
from collections.abc import Callable

from complianceos_core.extensions.registry import SlotRegistry
from complianceos_core.logging import ComplianceLogger

Registrar = Callable[[SlotRegistry], None]


class RegistrarHost:
    """Runs registrars against a slot registry, once each."""

    def __init__(
        self,
        registry: SlotRegistry | None = None,
        logger: ComplianceLogger | None = None,
    ) -> None:
        self._registry = registry or SlotRegistry.get()
        self._logger = logger
        self._installed: set[str] = set()
        self._lock = threading.Lock()

    @property
    def registry(self) -> SlotRegistry:
        return self._registry

    def install(self, name: str, registrar: Registrar) -> bool:
        """Run ``registrar`` unless a registrar named ``name`` already ran.

        A second install is refused: the registry keeps duplicates. A
        registrar that raises is not marked installed.

        Returns:
            True if the registrar ran, False if it was skipped
        """
        with self._lock:
            if name in self._installed:
                if self._logger:
                    self._logger.registry().registrar_skipped(name)
                return False
            self._installed.add(name)

        try:
            registrar(self._registry)
        except Exception:
            with self._lock:
                self._installed.discard(name)
            raise

        if self._logger:
            self._logger.registry().registrar_installed(name, self._registry.counts())
        return True

    def is_installed(self, name: str) -> bool:
        with self._lock:
            return name in self._installed

    @property
    def installed(self) -> list[str]:
        with self._lock:
            return sorted(self._installed)


CORE_DEFAULTS = "complianceos_core.defaults"


def register_core_defaults(registry: SlotRegistry) -> None:
    """Core edition registrations, installed before any optional module.

    Core surfaces render their own baseline content, so no slot receives a
    default component and every slot starts empty.
    """

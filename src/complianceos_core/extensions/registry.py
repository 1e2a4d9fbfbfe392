"""Slot registry.

Optional modules inject components into core surfaces by registering them
against a ``SlotName``. Registration happens once, at startup, through the
module's registrar; every render reads the current registrations.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from complianceos_core.extensions.slots import SlotName

logger = logging.getLogger(__name__)

# A component receives the slot's props and returns something renderable
# (a descriptor dict for the HTTP surface) or None to render nothing.
SlotComponent = Callable[[dict[str, Any]], Any]


class SlotRegistry:
    """
    Process-wide map from slot to an ordered list of components.

    Append-only in normal operation: duplicates are kept and render twice,
    which is why registrars must run exactly once.
    """

    _instance: "SlotRegistry | None" = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._slots: dict[SlotName, list[SlotComponent]] = {}
        self._lock = threading.Lock()

    @classmethod
    def get(cls) -> "SlotRegistry":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the registry (for testing)."""
        with cls._instance_lock:
            cls._instance = None

    def register(self, slot: SlotName | str, component: SlotComponent) -> None:
        """Append a component to a slot.

        Raises:
            ComplianceError: SLOT_UNKNOWN for a string outside the catalog
        """
        name = SlotName.coerce(slot)
        with self._lock:
            self._slots.setdefault(name, []).append(component)
        logger.debug("Registered %s in slot %s", _component_name(component), name.value)

    def get_components(self, slot: SlotName | str) -> tuple[SlotComponent, ...]:
        """Components registered for a slot, in registration order."""
        name = SlotName.coerce(slot)
        with self._lock:
            return tuple(self._slots.get(name, ()))

    def clear(self, slot: SlotName | str) -> None:
        """Remove every registration for one slot (tests and hot reload)."""
        name = SlotName.coerce(slot)
        with self._lock:
            self._slots.pop(name, None)

    def clear_all(self) -> None:
        """Remove every registration."""
        with self._lock:
            self._slots.clear()

    def counts(self) -> dict[str, int]:
        """Number of components per populated slot."""
        with self._lock:
            return {slot.value: len(components) for slot, components in self._slots.items()}


def _component_name(component: SlotComponent) -> str:
    return getattr(component, "__qualname__", None) or type(component).__name__

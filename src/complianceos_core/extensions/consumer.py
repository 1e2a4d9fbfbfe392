"""Slot consumer: renders every component registered for a slot."""

from dataclasses import dataclass
from typing import Any

from complianceos_core.extensions.registry import SlotRegistry
from complianceos_core.extensions.slots import SlotName


@dataclass(frozen=True)
class RenderedComponent:
    """One rendered child of a slot.

    ``key`` is ``"<slot>:<index>"`` and stays the same across renders as
    long as registrations do not change.
    """

    key: str
    slot: SlotName
    output: Any

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "slot": self.slot.value, "output": self.output}


def render_slot(
    slot: SlotName | str,
    props: dict[str, Any] | None = None,
    registry: SlotRegistry | None = None,
) -> list[RenderedComponent]:
    """Render a slot.

    Registrations are read on every call; nothing is cached between
    renders. An empty slot renders to an empty list.

    Args:
        slot: Catalog slot to render
        props: Shared props passed to every component
        registry: Registry to read (defaults to the process registry)

    Returns:
        Rendered children in registration order
    """
    name = SlotName.coerce(slot)
    registry = registry or SlotRegistry.get()
    props = props or {}

    return [
        RenderedComponent(key=f"{name.value}:{index}", slot=name, output=component(props))
        for index, component in enumerate(registry.get_components(name))
    ]


class Slot:
    """A slot bound to a name, for call sites that render it repeatedly."""

    def __init__(self, name: SlotName | str, registry: SlotRegistry | None = None) -> None:
        self.name = SlotName.coerce(name)
        self._registry = registry

    def __call__(self, props: dict[str, Any] | None = None) -> list[RenderedComponent]:
        return render_slot(self.name, props, registry=self._registry)

    def __repr__(self) -> str:
        return f"Slot({self.name.value!r})"

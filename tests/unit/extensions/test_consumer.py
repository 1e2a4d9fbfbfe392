"""Tests for the slot consumer."""

from complianceos_core.extensions import (
    RenderedComponent,
    Slot,
    SlotName,
    SlotRegistry,
    render_slot,
)


def echo(props):
    return {"echo": props}


class TestRenderSlot:
    """render_slot behaviour."""

    def test_empty_slot_renders_nothing(self):
        assert render_slot(SlotName.TOOLBAR_ACTIONS, {"tenant_id": "42"}) == []

    def test_toolbar_scenario(self):
        """Nothing registered renders zero children; one registration renders one."""
        props = {"tenant_id": "42", "page": "risks"}

        assert render_slot(SlotName.TOOLBAR_ACTIONS, props) == []
        assert render_slot(SlotName.SIDEBAR_WIDGETS, props) == []

        SlotRegistry.get().register(SlotName.TOOLBAR_ACTIONS, echo)

        rendered = render_slot(SlotName.TOOLBAR_ACTIONS, props)
        assert len(rendered) == 1
        assert rendered[0].output == {"echo": props}
        assert render_slot(SlotName.SIDEBAR_WIDGETS, props) == []

    def test_renders_in_registration_order_with_shared_props(self):
        registry = SlotRegistry()
        seen = []
        registry.register(SlotName.SIDEBAR_WIDGETS, lambda p: seen.append(("first", p)) or 1)
        registry.register(SlotName.SIDEBAR_WIDGETS, lambda p: seen.append(("second", p)) or 2)

        props = {"tenant_id": "7"}
        rendered = render_slot(SlotName.SIDEBAR_WIDGETS, props, registry=registry)

        assert [child.output for child in rendered] == [1, 2]
        assert seen == [("first", props), ("second", props)]

    def test_keys_are_slot_and_index(self):
        registry = SlotRegistry()
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)

        rendered = render_slot("toolbar-actions", {}, registry=registry)

        assert [child.key for child in rendered] == ["toolbar-actions:0", "toolbar-actions:1"]
        assert all(child.slot is SlotName.TOOLBAR_ACTIONS for child in rendered)

    def test_keys_stable_across_renders(self):
        registry = SlotRegistry()
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)

        first = render_slot(SlotName.TOOLBAR_ACTIONS, {}, registry=registry)
        second = render_slot(SlotName.TOOLBAR_ACTIONS, {}, registry=registry)

        assert [c.key for c in first] == [c.key for c in second]

    def test_each_render_rereads_registrations(self):
        registry = SlotRegistry()
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)
        assert len(render_slot(SlotName.TOOLBAR_ACTIONS, {}, registry=registry)) == 1

        registry.clear(SlotName.TOOLBAR_ACTIONS)
        assert render_slot(SlotName.TOOLBAR_ACTIONS, {}, registry=registry) == []

        registry.register(SlotName.TOOLBAR_ACTIONS, echo)
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)
        assert len(render_slot(SlotName.TOOLBAR_ACTIONS, {}, registry=registry)) == 2

    def test_props_default_to_empty(self):
        registry = SlotRegistry()
        registry.register(SlotName.TOOLBAR_ACTIONS, echo)

        rendered = render_slot(SlotName.TOOLBAR_ACTIONS, registry=registry)

        assert rendered[0].output == {"echo": {}}

    def test_to_dict(self):
        child = RenderedComponent(key="toolbar-actions:0", slot=SlotName.TOOLBAR_ACTIONS, output=1)
        assert child.to_dict() == {
            "key": "toolbar-actions:0",
            "slot": "toolbar-actions",
            "output": 1,
        }


class TestSlot:
    """Bound consumer."""

    def test_bound_slot_renders_current_registrations(self):
        toolbar = Slot(SlotName.TOOLBAR_ACTIONS)
        assert toolbar({"tenant_id": "42"}) == []

        SlotRegistry.get().register(SlotName.TOOLBAR_ACTIONS, echo)

        assert len(toolbar({"tenant_id": "42"})) == 1

    def test_bound_slot_accepts_string_name(self):
        assert Slot("sidebar-widgets").name is SlotName.SIDEBAR_WIDGETS

    def test_repr(self):
        assert repr(Slot(SlotName.HEADER_COPILOT)) == "Slot('header-copilot')"

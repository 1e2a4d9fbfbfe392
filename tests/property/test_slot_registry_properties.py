"""Property-based tests for slot registration and rendering."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from complianceos_core.errors import ComplianceError
from complianceos_core.extensions import RegistrarHost, SlotName, SlotRegistry, render_slot

slot_names = st.sampled_from(list(SlotName))

# Sequence of (slot, label) registrations
registrations = st.lists(st.tuples(slot_names, st.integers(0, 1000)), max_size=30)


def labelled(label: int):
    def component(props):
        return label

    return component


@pytest.mark.property
class TestRegistrationOrder:
    """Rendering follows registration order per slot."""

    @given(registrations)
    @settings(max_examples=50)
    def test_render_matches_registrations(self, sequence):
        registry = SlotRegistry()
        for slot, label in sequence:
            registry.register(slot, labelled(label))

        for slot in SlotName:
            expected = [label for s, label in sequence if s is slot]
            rendered = render_slot(slot, {"tenant_id": "1"}, registry=registry)

            assert [child.output for child in rendered] == expected
            assert [child.key for child in rendered] == [
                f"{slot.value}:{i}" for i in range(len(expected))
            ]

    @given(registrations)
    @settings(max_examples=50)
    def test_counts_match_registrations(self, sequence):
        registry = SlotRegistry()
        for slot, label in sequence:
            registry.register(slot, labelled(label))

        expected: dict[str, int] = {}
        for slot, _ in sequence:
            expected[slot.value] = expected.get(slot.value, 0) + 1

        assert registry.counts() == expected

    @given(registrations, slot_names)
    @settings(max_examples=50)
    def test_clear_only_affects_one_slot(self, sequence, cleared):
        registry = SlotRegistry()
        for slot, label in sequence:
            registry.register(slot, labelled(label))
        before = registry.counts()

        registry.clear(cleared)

        after = registry.counts()
        assert cleared.value not in after
        assert after == {k: v for k, v in before.items() if k != cleared.value}


@pytest.mark.property
class TestCatalogClosure:
    """Only catalog identifiers are accepted."""

    @given(st.text(max_size=30))
    @settings(max_examples=100)
    def test_unknown_strings_rejected(self, name):
        known = {slot.value for slot in SlotName}
        registry = SlotRegistry()

        if name in known:
            registry.register(name, labelled(0))
            assert registry.counts() == {name: 1}
        else:
            with pytest.raises(ComplianceError):
                registry.register(name, labelled(0))
            assert registry.counts() == {}


@pytest.mark.property
class TestRegistrarIdempotence:
    """Installing a registrar any number of times registers once."""

    @given(st.integers(min_value=1, max_value=10), slot_names)
    @settings(max_examples=30)
    def test_repeated_install(self, attempts, slot):
        registry = SlotRegistry()
        host = RegistrarHost(registry)

        def registrar(reg):
            reg.register(slot, labelled(1))

        results = [host.install("premium", registrar) for _ in range(attempts)]

        assert results == [True] + [False] * (attempts - 1)
        assert registry.counts() == {slot.value: 1}

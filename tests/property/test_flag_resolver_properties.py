"""Property-based tests for feature flag resolution."""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from complianceos_core.errors import ComplianceError
from complianceos_core.extensions import CAPABILITY_NAMES, FeatureFlagResolver, FeatureFlags

capability_names = st.sampled_from(sorted(CAPABILITY_NAMES))

flag_records = st.dictionaries(capability_names, st.booleans())

tenant_ids = st.one_of(
    st.integers(min_value=0, max_value=10_000),
    st.from_regex(r"^t[0-9]{1,4}$", fullmatch=True),
)


def full_defaults(record: dict[str, bool]) -> FeatureFlags:
    return FeatureFlags(**record)


@pytest.mark.property
class TestEffectiveFlags:
    """Effective flags are the defaults with the override on top."""

    @given(flag_records, tenant_ids)
    @settings(max_examples=50)
    def test_unknown_tenant_gets_defaults(self, defaults, tenant_id):
        resolver = FeatureFlagResolver(full_defaults(defaults))

        assert resolver.get_flags(tenant_id) == full_defaults(defaults)

    @given(flag_records, tenant_ids, st.lists(flag_records, min_size=1, max_size=5))
    @settings(max_examples=50)
    def test_overrides_merge_per_key(self, defaults, tenant_id, updates):
        resolver = FeatureFlagResolver(full_defaults(defaults))
        expected = full_defaults(defaults).to_dict()

        for update in updates:
            resolver.set_override(tenant_id, update)
            expected.update(update)

        assert resolver.get_flags(tenant_id).to_dict() == expected
        for name, value in expected.items():
            assert resolver.is_enabled(tenant_id, name) is value

    @given(flag_records, tenant_ids, tenant_ids, flag_records)
    @settings(max_examples=50)
    def test_overrides_are_isolated(self, defaults, tenant_a, tenant_b, update):
        assume(str(tenant_a) != str(tenant_b))
        resolver = FeatureFlagResolver(full_defaults(defaults))

        resolver.set_override(tenant_a, update)

        assert resolver.get_flags(tenant_b) == full_defaults(defaults)

    @given(st.text(max_size=20), tenant_ids)
    @settings(max_examples=50)
    def test_is_enabled_is_total(self, name, tenant_id):
        resolver = FeatureFlagResolver()

        assert resolver.is_enabled(tenant_id, name) in (True, False)


@pytest.mark.property
class TestRejectedUpdates:
    """Invalid partial records leave the override untouched."""

    @given(tenant_ids, flag_records, st.text(min_size=1, max_size=20))
    @settings(max_examples=50)
    def test_unknown_key_applies_nothing(self, tenant_id, first, unknown):
        assume(unknown not in CAPABILITY_NAMES)
        resolver = FeatureFlagResolver()
        resolver.set_override(tenant_id, first)

        update = {**dict.fromkeys(CAPABILITY_NAMES, True), unknown: True}

        with pytest.raises(ComplianceError):
            resolver.set_override(tenant_id, update)

        assert resolver.get_override(tenant_id) == first

    @given(tenant_ids, capability_names, st.one_of(st.integers(), st.text(), st.none()))
    @settings(max_examples=50)
    def test_non_boolean_rejected(self, tenant_id, name, value):
        resolver = FeatureFlagResolver()

        with pytest.raises(ComplianceError) as exc_info:
            resolver.set_override(tenant_id, {name: value})

        assert exc_info.value.code == "FLAG_INVALID"
        assert resolver.get_override(tenant_id) == {}


@pytest.mark.property
class TestListing:
    @given(st.dictionaries(tenant_ids, flag_records, max_size=10), capability_names)
    @settings(max_examples=50)
    def test_lists_explicit_true_overrides(self, overrides, name):
        resolver = FeatureFlagResolver()
        for tenant_id, record in overrides.items():
            resolver.set_override(tenant_id, record)

        expected = {str(t) for t, record in overrides.items() if record.get(name) is True}

        assert set(resolver.list_tenants_with_capability(name)) == expected

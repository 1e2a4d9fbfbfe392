"""Tests for FeatureFlagResolver."""

import pytest

from complianceos_core.errors import ComplianceError
from complianceos_core.extensions import (
    CAPABILITY_NAMES,
    Capability,
    FeatureFlagResolver,
    FeatureFlags,
    get_flag_resolver,
    is_feature_enabled,
    reset_flag_resolver,
    set_flag_resolver,
)


class TestFeatureFlags:
    """FeatureFlags record."""

    def test_capability_enum_matches_fields(self):
        assert {c.value for c in Capability} == CAPABILITY_NAMES

    def test_defaults_are_off(self):
        assert not any(FeatureFlags().to_dict().values())

    def test_merged_overrides_per_key(self):
        flags = FeatureFlags(vendor_management=True)
        merged = flags.merged({"ai_advisor": True})

        assert merged.ai_advisor is True
        assert merged.vendor_management is True
        assert flags.ai_advisor is False


class TestGetFlags:
    """Effective flags."""

    def test_unknown_tenant_gets_defaults(self):
        defaults = FeatureFlags(vendor_management=True)
        resolver = FeatureFlagResolver(defaults)

        assert resolver.get_flags("never-seen") == defaults

    def test_mapping_defaults(self):
        resolver = FeatureFlagResolver({"custom_frameworks": True})
        assert resolver.defaults == FeatureFlags(custom_frameworks=True)

    def test_seed_overrides(self):
        resolver = FeatureFlagResolver(overrides={42: {"ai_advisor": True}})

        assert resolver.is_enabled("42", Capability.AI_ADVISOR)
        assert resolver.get_override(42) == {"ai_advisor": True}

    def test_seed_overrides_validated(self):
        with pytest.raises(ComplianceError) as exc_info:
            FeatureFlagResolver(overrides={"1": {"telepathy": True}})
        assert exc_info.value.code == "FLAG_UNKNOWN"


class TestIsEnabled:
    """is_enabled totality."""

    def test_advisor_scenario(self):
        resolver = FeatureFlagResolver(FeatureFlags(ai_advisor=False))

        resolver.set_override(42, {"ai_advisor": True})

        assert resolver.is_enabled(42, "ai_advisor") is True
        assert resolver.is_enabled(7, "ai_advisor") is False

    def test_accepts_capability_enum(self):
        resolver = FeatureFlagResolver(FeatureFlags(questionnaire_ai=True))
        assert resolver.is_enabled("1", Capability.QUESTIONNAIRE_AI)

    def test_unknown_capability_is_false(self):
        resolver = FeatureFlagResolver()
        assert resolver.is_enabled("1", "telepathy") is False

    def test_int_and_str_tenant_ids_are_the_same_tenant(self):
        resolver = FeatureFlagResolver()
        resolver.set_override("42", {"ai_advisor": True})

        assert resolver.is_enabled(42, Capability.AI_ADVISOR)


class TestSetOverride:
    """Administrative updates."""

    def test_only_named_keys_change(self):
        resolver = FeatureFlagResolver(FeatureFlags(vendor_management=True))
        resolver.set_override("t", {"risk_auto_triage": True})
        before = resolver.get_flags("t")

        resolver.set_override("t", {"ai_advisor": True})
        after = resolver.get_flags("t")

        assert after.ai_advisor is True
        assert after.risk_auto_triage is True
        assert after.vendor_management is True
        assert {k: v for k, v in after.to_dict().items() if k != "ai_advisor"} == {
            k: v for k, v in before.to_dict().items() if k != "ai_advisor"
        }

    def test_override_can_disable_a_default(self):
        resolver = FeatureFlagResolver(FeatureFlags(vendor_management=True))
        resolver.set_override("t", {"vendor_management": False})

        assert resolver.is_enabled("t", "vendor_management") is False
        assert resolver.is_enabled("other", "vendor_management") is True

    def test_unknown_key_rejected_and_nothing_applied(self):
        resolver = FeatureFlagResolver()

        with pytest.raises(ComplianceError) as exc_info:
            resolver.set_override("t", {"ai_advisor": True, "telepathy": True})

        assert exc_info.value.code == "FLAG_UNKNOWN"
        assert exc_info.value.http_status == 400
        assert resolver.get_override("t") == {}

    def test_non_boolean_rejected(self):
        resolver = FeatureFlagResolver()

        with pytest.raises(ComplianceError) as exc_info:
            resolver.set_override("t", {"ai_advisor": "yes"})

        assert exc_info.value.code == "FLAG_INVALID"
        assert resolver.get_override("t") == {}

    def test_clear_override(self):
        resolver = FeatureFlagResolver()
        resolver.set_override("t", {"ai_advisor": True})

        resolver.clear_override("t")

        assert resolver.get_flags("t") == resolver.defaults
        assert resolver.tenants_with_overrides() == []

    def test_get_override_is_a_copy(self):
        resolver = FeatureFlagResolver()
        resolver.set_override("t", {"ai_advisor": True})

        resolver.get_override("t")["ai_advisor"] = False

        assert resolver.is_enabled("t", "ai_advisor")

    def test_logs_override_changes(self, logger, log_events):
        resolver = FeatureFlagResolver(logger=logger)

        resolver.set_override(42, {"ai_advisor": True})
        resolver.clear_override(42)
        resolver.clear_override(42)

        events = log_events()
        assert [e["event"] for e in events] == ["flag_override", "flag_override_cleared"]
        assert events[0]["tenant_id"] == "42"
        assert events[0]["changes"] == {"ai_advisor": True}


class TestListTenantsWithCapability:
    """Override-only diagnostic query."""

    def test_lists_only_explicit_true_overrides(self):
        resolver = FeatureFlagResolver(FeatureFlags(ai_advisor=True))
        resolver.set_override("a", {"ai_advisor": True})
        resolver.set_override("b", {"ai_advisor": False})
        resolver.set_override("c", {"risk_auto_triage": True})

        assert resolver.list_tenants_with_capability(Capability.AI_ADVISOR) == ["a"]
        # "c" is enabled through the defaults but is not listed
        assert resolver.is_enabled("c", Capability.AI_ADVISOR)

    def test_returns_string_ids(self):
        resolver = FeatureFlagResolver()
        resolver.set_override(42, {"ai_advisor": True})

        assert resolver.list_tenants_with_capability("ai_advisor") == ["42"]

    def test_unknown_capability_lists_nobody(self):
        resolver = FeatureFlagResolver()
        resolver.set_override("a", {"ai_advisor": True})

        assert resolver.list_tenants_with_capability("telepathy") == []


class TestGlobalResolver:
    """get / set / reset."""

    def test_get_creates_default_resolver(self):
        resolver = get_flag_resolver()
        assert resolver is get_flag_resolver()
        assert resolver.defaults == FeatureFlags()

    def test_set_and_reset(self):
        custom = FeatureFlagResolver(FeatureFlags(ai_advisor=True))
        set_flag_resolver(custom)

        assert get_flag_resolver() is custom
        assert is_feature_enabled("any", Capability.AI_ADVISOR)

        reset_flag_resolver()
        assert get_flag_resolver() is not custom

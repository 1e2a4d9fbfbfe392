"""Tests for ComplianceLogger."""

import io
import json

from complianceos_core.logging import ComplianceLogger, LogConfig
from complianceos_core.types import LogFormat, LogLevel


def make_logger(**kwargs) -> tuple[ComplianceLogger, io.StringIO]:
    output = io.StringIO()
    return ComplianceLogger(LogConfig(output=output, **kwargs)), output


class TestLevels:
    def test_filters_below_level(self):
        logger, output = make_logger(level=LogLevel.WARN, format=LogFormat.JSON)

        logger.flags().override_set("42", {"ai_advisor": True})
        logger.registry().registrar_skipped("premium")

        lines = output.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["level"] == "WARN"

    def test_disabled_component(self):
        logger, output = make_logger(format=LogFormat.JSON, components={"flags": False})

        logger.flags().override_cleared("42")
        logger.capability().unavailable("ai_advisor", "42", "edition")

        lines = output.getvalue().splitlines()
        assert [json.loads(line)["component"] for line in lines] == ["capability"]

    def test_components_default_to_enabled(self):
        config = LogConfig(components={"flags": False})

        assert config.components == {
            "flags": False,
            "edition": True,
            "registry": True,
            "capability": True,
        }


class TestJsonFormat:
    def test_entry_fields(self):
        logger, output = make_logger(format=LogFormat.JSON)

        logger.edition().resolved("premium", "complianceos_premium", True, False)

        entry = json.loads(output.getvalue())
        assert entry["component"] == "edition"
        assert entry["level"] == "INFO"
        assert entry["event"] == "edition_resolved"
        assert entry["module"] == "complianceos_premium"
        assert entry["timestamp"].endswith("Z")

    def test_failed_is_error(self):
        logger, output = make_logger(format=LogFormat.JSON)

        logger.edition().failed(RuntimeError("boom"))

        entry = json.loads(output.getvalue())
        assert entry["level"] == "ERROR"
        assert entry["error_type"] == "RuntimeError"


class TestColoredFormat:
    def test_component_prefix(self):
        logger, output = make_logger()

        logger.edition().resolved("core", "complianceos_premium", False, False)

        text = output.getvalue()
        assert "[EDITION]" in text
        assert "not installed, using stubs" in text

    def test_force_disabled_message(self):
        logger, output = make_logger()

        logger.edition().resolved("core", "complianceos_premium", True, True)

        assert "force-disabled" in output.getvalue()

    def test_context_truncated(self):
        logger, output = make_logger(truncate_at=20)

        logger.registry().registrar_installed("premium", {"header-copilot": 1, "sidebar": 2})

        assert "..." in output.getvalue()

    def test_context_hidden(self):
        logger, output = make_logger(show_context=False)

        logger.capability().unavailable("ai_advisor", "42", "tenant")

        assert "'event'" not in output.getvalue()

    def test_configure_replaces_config(self):
        logger, _ = make_logger()
        output = io.StringIO()

        logger.configure(LogConfig(format=LogFormat.JSON, output=output))
        logger.flags().override_cleared("42")

        assert json.loads(output.getvalue())["event"] == "flag_override_cleared"

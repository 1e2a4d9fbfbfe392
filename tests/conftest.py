"""
Pytest configuration and shared fixtures for ComplianceOS tests.
"""

import io
import json
import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from complianceos_core.config import EditionConfig  # noqa: E402
from complianceos_core.config import loader as config_loader  # noqa: E402
from complianceos_core.editions import EditionResolution, configure_edition, reset_edition  # noqa: E402
from complianceos_core.extensions import SlotRegistry, reset_flag_resolver  # noqa: E402
from complianceos_core.extensions.capabilities import reset_capabilities_provider  # noqa: E402
from complianceos_core.logging import ComplianceLogger, LogConfig  # noqa: E402
from complianceos_core.types import LogFormat, LogLevel  # noqa: E402
from complianceos_premium.advisor import (  # noqa: E402
    AdvisorClient,
    reset_advisor_client,
    set_advisor_client,
)

ENV_VARS = (
    "COMPLIANCEOS_DISABLE_PREMIUM",
    "COMPLIANCEOS_CONFIG_PATH",
    "COMPLIANCEOS_ADVISOR_URL",
)


# =============================================================================
# Process State
# =============================================================================


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test a fresh registry, flag resolver and edition."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_loader, "_default_loader", None)

    SlotRegistry.reset()
    reset_flag_resolver()
    reset_edition()
    reset_capabilities_provider()
    reset_advisor_client()
    yield
    SlotRegistry.reset()
    reset_flag_resolver()
    reset_edition()
    reset_capabilities_provider()
    reset_advisor_client()


@pytest.fixture
def core_edition() -> EditionResolution:
    """Process edition forced to core (premium module installed but disabled)."""
    return configure_edition(EditionConfig(disable_premium=True))


@pytest.fixture
def premium_edition() -> EditionResolution:
    """Process edition backed by the installed complianceos_premium."""
    return configure_edition(EditionConfig())


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def log_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_output: io.StringIO) -> ComplianceLogger:
    """JSON logger writing to an in-memory stream."""
    return ComplianceLogger(
        LogConfig(level=LogLevel.DEBUG, format=LogFormat.JSON, output=log_output)
    )


@pytest.fixture
def log_events(log_output: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    """Parsed JSON log lines written so far."""

    def read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in log_output.getvalue().splitlines() if line]

    return read


# =============================================================================
# Module Fixtures
# =============================================================================


@pytest.fixture
def make_module(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[[str, str], str]:
    """Write an importable module and return its name.

    The module is removed from sys.modules after the test.
    """

    def make(name: str, source: str) -> str:
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source))
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, name, raising=False)
        return name

    yield make

    for name in [n for n in sys.modules if n.startswith("fake_premium")]:
        del sys.modules[name]


# =============================================================================
# Advisor Fixtures
# =============================================================================


class AdvisorRecorder:
    """Canned advisor responses keyed by operation, with a request log."""

    def __init__(self) -> None:
        self.responses: dict[str, httpx.Response] = {}
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def respond(self, operation: str, body: Any = None, status_code: int = 200) -> None:
        self.responses[operation] = httpx.Response(status_code, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        operation = request.url.path.rsplit("/", 1)[-1]
        self.requests.append((operation, json.loads(request.content)))
        if operation not in self.responses:
            return httpx.Response(404, json={"error": "unknown operation"})
        return self.responses[operation]


@pytest.fixture
def advisor() -> AdvisorRecorder:
    """Shared advisor client backed by an httpx.MockTransport."""
    recorder = AdvisorRecorder()
    set_advisor_client(
        AdvisorClient(
            base_url="http://advisor.test/api/ai",
            transport=httpx.MockTransport(recorder.handler),
        )
    )
    return recorder


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "api: REST API tests")

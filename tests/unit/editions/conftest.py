"""Fixtures for edition resolution tests."""

import pytest

MATCHING_SURFACE = '''
calls = []


async def enhance_section(tenant_id, section_key, content):
    return "enhanced"


async def triage_risk(tenant_id, threat, vulnerability, affected_assets=None):
    return "triaged"


async def suggest_controls(tenant_id, threat, vulnerability):
    return []


async def generate_questionnaire_answers(tenant_id, questions):
    return []


def register_premium(registry):
    from complianceos_core.extensions import SlotName

    calls.append(registry)
    registry.register(SlotName.TOOLBAR_ACTIONS, lambda props: {"component": "Extra"})
'''

DRIFTED_SURFACE = '''
async def enhance_section(tenant_id, section_key):
    return "enhanced"


def triage_risk(tenant_id, threat, vulnerability, affected_assets=None):
    return "triaged"


async def suggest_controls(tenant_id, threat, vulnerability):
    return []
'''

BROKEN_MODULE = '''
raise RuntimeError("premium module exploded on import")
'''


@pytest.fixture
def matching_surface() -> str:
    """Source of a module whose surface matches the stub."""
    return MATCHING_SURFACE


@pytest.fixture
def drifted_surface() -> str:
    """Source of a module with a missing function and changed signatures."""
    return DRIFTED_SURFACE


@pytest.fixture
def broken_module() -> str:
    """Source of a module that fails on import."""
    return BROKEN_MODULE

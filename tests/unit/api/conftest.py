"""Fixtures for REST API tests."""

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from complianceos_core.api import create_app
from complianceos_core.extensions import (
    FeatureFlagResolver,
    FeatureFlags,
    RegistrarHost,
    SlotRegistry,
    set_flag_resolver,
)


@pytest.fixture
def flags() -> FeatureFlagResolver:
    """Process flag resolver with one tenant (42) opted into the advisor."""
    resolver = FeatureFlagResolver(FeatureFlags(vendor_management=True))
    resolver.set_override("42", {"ai_advisor": True, "risk_auto_triage": True})
    set_flag_resolver(resolver)
    return resolver


@pytest.fixture
def core_app(core_edition, flags, logger) -> FastAPI:
    return create_app(
        edition=core_edition, flags=flags, registry=SlotRegistry.get(), logger=logger
    )


@pytest.fixture
def premium_app(premium_edition, flags, logger) -> FastAPI:
    registry = SlotRegistry.get()
    host = RegistrarHost(registry)
    host.install(premium_edition.module_name, premium_edition.registrar)
    return create_app(
        edition=premium_edition,
        flags=flags,
        registry=registry,
        registrar_host=host,
        logger=logger,
    )


@pytest.fixture
def core_client(core_app) -> TestClient:
    return TestClient(core_app)


@pytest.fixture
def premium_client(premium_app) -> TestClient:
    return TestClient(premium_app)

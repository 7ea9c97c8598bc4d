"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
Provides testing settings, a fake rendering engine and an API client.
"""

import os

# Settings are read on first import of the app, so pin the testing environment first
os.environ.setdefault("TEE_SKIN_ENVIRONMENT", "testing")
os.environ.setdefault("TEE_SKIN_LOG_LEVEL", "DEBUG")
os.environ.setdefault("TEE_SKIN_RENDER_ENGINE_URL", "http://render-engine.test")

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from tee_skin_api.api.main import create_app
from tee_skin_api.core.rendering.gateway import get_render_gateway
from tee_skin_api.models.schemas import RenderSkinQuery

from tests.utils.mocks import FakeRenderGateway, PNG_BYTES


@pytest.fixture
def fake_gateway() -> FakeRenderGateway:
    """Rendering engine stand-in that records every call."""
    return FakeRenderGateway(image=PNG_BYTES)


@pytest.fixture
def api_client(fake_gateway: FakeRenderGateway) -> Generator[TestClient, None, None]:
    """FastAPI test client wired to the fake rendering engine."""
    app = create_app()
    app.dependency_overrides[get_render_gateway] = lambda: fake_gateway
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def empty_query() -> RenderSkinQuery:
    """Render query with no parameters supplied."""
    return RenderSkinQuery()

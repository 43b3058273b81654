"""Shared pytest fixtures for the insight engine and API tests."""

import pytest

from insight_api.models import ScenarioRecord


@pytest.fixture
def make_record():
    """Build a ScenarioRecord with batting framing unless overridden."""
    def _make(**overrides):
        fields = {"is_batting": True, "normalized_text": "scenario"}
        fields.update(overrides)
        return ScenarioRecord(**fields)

    return _make


@pytest.fixture
def client():
    """FastAPI test client with startup hooks run."""
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as c:
        yield c

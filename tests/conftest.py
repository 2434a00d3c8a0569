"""Shared test fixtures for the user agent classifier tests."""

import pytest
from fastapi.testclient import TestClient

from ua_classifier.main import app


@pytest.fixture
def api_client() -> TestClient:
    """
    Returns a fastapi.testclient.TestClient bound to the service app.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def english():
    """Identity translator so catalog labels are deterministic."""
    return lambda label: label

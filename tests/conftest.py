from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_site.api.main import app
from portfolio_site.data.repository import StaticContentRepository


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the site."""
    return TestClient(app)


@pytest.fixture
def repository() -> StaticContentRepository:
    """Repository over the compiled-in content tables."""
    return StaticContentRepository()

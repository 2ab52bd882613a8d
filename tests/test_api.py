"""Tests for application wiring, routing and error responses."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_site.api.main import app, create_app


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self) -> None:
        assert app.title == "Portfolio Site"

    def test_app_version(self) -> None:
        assert app.version == "0.1.0"

    def test_renderer_and_repository_on_state(self) -> None:
        assert app.state.renderer is not None
        assert app.state.repository is not None

    def test_factory_builds_independent_apps(self) -> None:
        other = create_app()
        assert other is not app
        assert other.state.renderer is not app.state.renderer


class TestInvalidRoutes:
    """Tests for handling unmatched routes."""

    def test_unknown_route_returns_404(self, client: TestClient) -> None:
        response = client.get("/nonexistent")
        assert response.status_code == 404

    def test_root_is_not_a_prefix_match(self, client: TestClient) -> None:
        assert client.get("/about/team").status_code == 404
        assert client.get("/index.html").status_code == 404

    def test_root_returns_home(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "hero" in response.text

    def test_errors_are_plain_text(self, client: TestClient) -> None:
        response = client.get("/nonexistent")
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Not Found"


class TestMethodConstraints:
    """Pages accept GET only; demo actions accept POST only."""

    @pytest.mark.parametrize(
        "path", ["/", "/about", "/skills", "/skills/grid", "/projects/grid", "/soccer"]
    )
    def test_post_to_page_returns_405(self, client: TestClient, path: str) -> None:
        assert client.post(path).status_code == 405

    @pytest.mark.parametrize("path", ["/soccer/fetch", "/soccer/download", "/soccer/subscribe"])
    def test_get_to_action_returns_405(self, client: TestClient, path: str) -> None:
        response = client.get(path)
        assert response.status_code == 405
        assert "POST" in response.headers["allow"]


class TestStaticAssets:
    """Tests for static file delegation and the favicon."""

    def test_stylesheet_served_as_css(self, client: TestClient) -> None:
        response = client.get("/static/css/styles.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    def test_script_served(self, client: TestClient) -> None:
        response = client.get("/static/js/main.js")
        assert response.status_code == 200
        assert "javascript" in response.headers["content-type"]

    def test_missing_static_file_returns_404(self, client: TestClient) -> None:
        assert client.get("/static/css/missing.css").status_code == 404

    def test_favicon(self, client: TestClient) -> None:
        response = client.get("/favicon.ico")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/x-icon"
        assert response.content[:4] == b"\x00\x00\x01\x00"

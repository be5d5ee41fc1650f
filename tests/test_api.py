"""Tests for the FastAPI API routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from punktual import __version__
from punktual.api.routes import get_generator, set_generator
from punktual.modules.embed import INCOMPLETE_EVENT_PLACEHOLDER, NO_PLATFORMS_PLACEHOLDER, ButtonCodeGenerator

EVENT = {
    "title": "Launch",
    "startDate": "2025-12-25",
    "startTime": "14:30",
    "endDate": "2025-12-25",
    "endTime": "16:00",
    "location": "SF",
}
STYLE = {"selectedPlatforms": {"google": True, "apple": True}}
NOW = "2025-12-01T12:00:00Z"


@pytest.fixture
def client():
    """Create a test client with a generator pinned to a known base URL."""
    set_generator(ButtonCodeGenerator(base_url="https://punktual.co"))
    from punktual.main import create_app
    app = create_app()
    yield TestClient(app)
    set_generator(None)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health(self, client) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestLinksEndpoint:
    """Tests for POST /api/links."""

    def test_links(self, client) -> None:
        response = client.post("/api/links", json={"event": EVENT, "now": NOW})
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"google", "apple", "outlook", "office365", "outlookcom", "yahoo"}
        assert "dates=20251225T143000/20251225T160000" in data["google"]
        assert data["outlookcom"] == data["outlook"]

    def test_incomplete_event(self, client) -> None:
        response = client.post("/api/links", json={"event": {"title": "Launch"}})
        assert response.status_code == 200
        assert all(url == "" for url in response.json().values())

    def test_invalid_payload(self, client) -> None:
        response = client.post("/api/links", json={"event": {"isAllDay": "maybe"}})
        assert response.status_code == 422


class TestCodeEndpoints:
    """Tests for the code generation endpoints."""

    def test_button_code(self, client) -> None:
        response = client.post("/api/code", json={"event": EVENT, "style": STYLE, "now": NOW})
        assert response.status_code == 200
        code = response.json()["code"]
        assert 'class="punktual-button"' in code
        assert code.count("punktual-dropdown-item\"") == 2

    def test_tracked_individual(self, client) -> None:
        response = client.post("/api/code", json={
            "event": EVENT,
            "style": {**STYLE, "buttonLayout": "individual"},
            "options": {"shareId": "abc123"},
        })
        code = response.json()["code"]
        assert 'href="https://punktual.co/e/abc123?cal=google"' in code
        assert 'href="https://punktual.co/e/abc123?cal=apple"' in code

    def test_output_type_email(self, client) -> None:
        response = client.post("/api/code", json={"event": EVENT, "style": STYLE, "outputType": "email"})
        assert response.json()["code"].startswith('Add "Launch" to your calendar:')

    def test_placeholders(self, client) -> None:
        response = client.post("/api/code", json={"event": EVENT, "style": {"selectedPlatforms": {}}})
        assert response.json()["code"] == NO_PLATFORMS_PLACEHOLDER
        response = client.post("/api/code", json={"event": {"title": "Launch"}, "style": STYLE})
        assert response.json()["code"] == INCOMPLETE_EVENT_PLACEHOLDER

    def test_supplied_links(self, client) -> None:
        response = client.post("/api/code", json={
            "event": EVENT,
            "style": {"selectedPlatforms": {"google": True}},
            "links": {"google": "https://punktual.co/eventid=ABC123"},
        })
        assert 'href="https://punktual.co/eventid=ABC123"' in response.json()["code"]

    def test_direct_links(self, client) -> None:
        response = client.post("/api/direct-links", json={"event": EVENT, "style": STYLE})
        assert response.json()["code"].count("<li>") == 2

    def test_email_text(self, client) -> None:
        response = client.post("/api/email-text", json={"event": EVENT, "style": STYLE})
        assert "Powered by Punktual" in response.json()["code"]


class TestGeneratorSingleton:
    """Tests for the shared generator accessor."""

    def test_lazy_default(self) -> None:
        set_generator(None)
        generator = get_generator()
        assert generator is get_generator()
        set_generator(None)

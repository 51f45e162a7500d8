"""Integration tests for sk27.api.main: FastAPI endpoints.

All tests use the FastAPI TestClient with the image adapter replaced by a
fake, so no request ever reaches the image service.  Tests cover every
endpoint:

- ``GET /``: server-rendered landing page.
- ``GET /api/config``: timings and content ids.
- ``GET /api/slots/{slot_id}``: deferred image slot resolution.
- ``GET /static/...``: bundled assets.
"""

from __future__ import annotations

from sk27.core.content import FAQS, IMAGE_SLOTS, NAV_LINKS

# ---------------------------------------------------------------------------
# Index page tests.
# ---------------------------------------------------------------------------


class TestIndexPage:
    """Test GET /: landing page."""

    def test_index_returns_html(self, test_client):
        """GET / should return 200 with HTML content."""
        resp = test_client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "SK-27 GYM" in resp.text

    def test_index_initial_state(self, test_client):
        html = test_client.get("/").text
        assert '<html lang="en" class="dark">' in html
        assert 'id="splash"' in html
        assert html.count('data-state="loading"') == len(IMAGE_SLOTS)

    def test_index_does_not_fetch_images(self, test_client, fake_fetcher):
        """Slots load from the browser; rendering the page never calls the service."""
        test_client.get("/")
        assert fake_fetcher.prompts == []

    def test_index_references_assets(self, test_client):
        html = test_client.get("/").text
        assert "/static/css/site.css" in html
        assert 'type="module" src="/static/js/app.js' in html


# ---------------------------------------------------------------------------
# Configuration endpoint tests.
# ---------------------------------------------------------------------------


class TestGetConfig:
    """Test GET /api/config: page configuration."""

    def test_config_returns_version(self, test_client):
        data = test_client.get("/api/config").json()
        assert "version" in data

    def test_config_timings(self, test_client):
        data = test_client.get("/api/config").json()
        assert data["reveal_threshold"] > 0
        assert data["splash_duration_ms"] >= 0
        assert data["navbar_scroll_offset"] >= 0

    def test_config_content(self, test_client):
        data = test_client.get("/api/config").json()
        assert [link["href"] for link in data["nav_links"]] == [link.href for link in NAV_LINKS]
        assert len(data["faqs"]) == len(FAQS)
        assert data["faq_initial_active"] == 0
        assert set(data["slot_ids"]) == set(IMAGE_SLOTS)


# ---------------------------------------------------------------------------
# Slot endpoint tests.
# ---------------------------------------------------------------------------


class TestGetSlot:
    """Test GET /api/slots/{slot_id}: image slot resolution."""

    def test_ready_slot(self, test_client, fake_fetcher):
        resp = test_client.get("/api/slots/about-barbell")
        assert resp.status_code == 200
        data = resp.json()
        assert data["slot_id"] == "about-barbell"
        assert data["state"] == "ready"
        assert data["src"] == fake_fetcher.payload
        assert 'data-state="ready"' in data["html"]
        assert fake_fetcher.prompts == [IMAGE_SLOTS["about-barbell"].prompt]

    def test_unavailable_slot_is_not_an_error(self, test_client, fake_fetcher):
        fake_fetcher.payload = None
        resp = test_client.get("/api/slots/hero-backdrop")
        assert resp.status_code == 200
        data = resp.json()
        assert data["state"] == "unavailable"
        assert data["src"] is None
        assert "Media unavailable" in data["html"]

    def test_unknown_slot_404(self, test_client, fake_fetcher):
        resp = test_client.get("/api/slots/not-a-slot")
        assert resp.status_code == 404
        assert fake_fetcher.prompts == []

    def test_each_request_fetches_once(self, test_client, fake_fetcher):
        for slot_id in IMAGE_SLOTS:
            test_client.get(f"/api/slots/{slot_id}")
        assert len(fake_fetcher.prompts) == len(IMAGE_SLOTS)


# ---------------------------------------------------------------------------
# Static assets.
# ---------------------------------------------------------------------------


class TestStaticAssets:
    def test_stylesheet_served(self, test_client):
        resp = test_client.get("/static/css/site.css")
        assert resp.status_code == 200

    def test_script_served(self, test_client):
        resp = test_client.get("/static/js/app.js")
        assert resp.status_code == 200


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


class TestMain:
    def test_main_launches_uvicorn(self):
        from unittest.mock import patch

        from sk27.api.main import main
        from sk27.core.config import config

        with patch("uvicorn.run") as run, patch("logging.basicConfig"):
            main()

        run.assert_called_once_with(
            "sk27.api.main:app",
            host=config.server_host,
            port=config.server_port,
            reload=False,
        )

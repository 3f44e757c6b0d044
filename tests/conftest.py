"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    monkeypatch.setenv("QUOTE_ENVIRONMENT", "development")
    monkeypatch.setenv("QUOTE_LOG_JSON", "false")
    monkeypatch.setenv("QUOTE_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUOTE_RATE_LIMIT_BACKEND", "memory")

    # Reset cached settings
    import quote_server.config.loader as loader
    loader._settings = None
    yield
    loader._settings = None


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A minimal site tree: three pages and a couple of assets."""
    (tmp_path / "index.html").write_text("<html><body>Quote builder</body></html>")
    (tmp_path / "about-us.html").write_text("<html><body>About us</body></html>")
    (tmp_path / "success.html").write_text("<html><body>Thank you</body></html>")
    css_dir = tmp_path / "assets" / "css"
    css_dir.mkdir(parents=True)
    (css_dir / "style.css").write_text("body { color: #111; }\n")
    js_dir = tmp_path / "assets" / "js"
    js_dir.mkdir(parents=True)
    (js_dir / "quote.js").write_text("const total = 0;\n")
    (tmp_path / "secret.txt").write_text("not an asset")
    return tmp_path


@pytest.fixture
def make_settings(site_root):
    """Factory for QuoteSettings pointed at the test site tree."""
    from quote_server.config.loader import QuoteSettings

    def _make(**overrides):
        overrides.setdefault("site_root", str(site_root))
        return QuoteSettings(**overrides)

    return _make


@pytest.fixture
def make_client(make_settings):
    """Factory for TestClients over apps built with custom settings."""
    from quote_server.main import create_app

    clients: list[TestClient] = []

    def _make(routes=None, store=None, **overrides):
        app = create_app(make_settings(**overrides), routes=routes, store=store)
        c = TestClient(app, raise_server_exceptions=False)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    """Test client over the default app."""
    return make_client()

"""Tests for the HTTP routes. The ledger is replaced by an in-memory fake."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from terminal_render.config import settings
from terminal_render.dependencies import get_ledger
from terminal_render.main import app
from terminal_render.render.rasterizer import RenderBackendError
from tests.conftest import FakeLedger, cairo_available, make_record

client = TestClient(app)

fake_ledger = FakeLedger(records={i: make_record(i) for i in range(1, 12)}, count=11)


@pytest.fixture(autouse=True)
def _override_ledger():
    fake_ledger.requested.clear()
    fake_ledger.count_reads = 0
    app.dependency_overrides[get_ledger] = lambda: fake_ledger
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == settings.terminal_env


# ── OpenGraph images ──


def test_mint_feed_window_svg():
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "10", "total": "11", "format": "svg"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["cache-control"] == "no-store"
    assert response.headers["x-artifact-mode"] == "feed_window"
    assert response.headers["x-artifact-height"] == "800"
    assert "#10 of 11" in response.text
    assert fake_ledger.requested == [[7, 8, 9, 10, 11, 12, 13]]


def test_mint_compact():
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "10", "size": "compact", "format": "svg"})
    assert response.headers["x-artifact-height"] == "630"
    assert fake_ledger.requested == [[9, 10, 11]]


@pytest.mark.parametrize("token_id", [None, "abc", "0", "-4", "1.5"])
def test_mint_promotional_fallback(token_id):
    params = {"format": "svg"}
    if token_id is not None:
        params["tokenId"] = token_id
    response = client.get("/api/opengraph-image/mint", params=params)

    assert response.status_code == 200
    assert response.headers["x-artifact-mode"] == "promotional"
    assert "MINT" in response.text
    assert fake_ledger.requested == []


def test_mint_unknown_record_is_promotional():
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "500", "format": "svg"})
    assert response.headers["x-artifact-mode"] == "promotional"


def test_mint_uses_fallback_fields():
    params = {
        "tokenId": "12",
        "username": "fresh",
        "text": "just minted this",
        "color": "#000080",
        "timestamp": "1737909240",
        "format": "svg",
    }
    response = client.get("/api/opengraph-image/mint", params=params)
    assert response.headers["x-artifact-mode"] == "feed_window"
    assert '<tspan class="usr" fill="#0000ff">&lt;fresh&gt;</tspan>' in response.text


def test_mint_ignores_malformed_total():
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "10", "total": "lots", "format": "svg"})
    assert response.status_code == 200
    assert " of " not in response.text


def test_transmission_receipt():
    response = client.get("/api/opengraph-image/transmission", params={"tokenId": "10", "format": "svg"})
    assert response.headers["x-artifact-mode"] == "single_message"
    assert "TX #10" in response.text
    assert "of 11 transmissions" in response.text
    assert fake_ledger.requested == [[10]]


@pytest.mark.skipif(not cairo_available(), reason="cairo not installed")
def test_mint_png():
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "10"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_render_backend_failure_is_500(monkeypatch):
    def broken(svg, width, height):
        raise RenderBackendError("no cairo")

    monkeypatch.setattr("terminal_render.render.engine.svg_to_png", broken)
    response = client.get("/api/opengraph-image/mint", params={"tokenId": "10"})
    assert response.status_code == 500
    assert response.json() == {"error": "Rendering backend failure"}


# ── Token previews ──


def test_preview_message_get():
    response = client.get(
        "/api/preview-nft", params={"username": "alice", "text": "hi there", "timestamp": "1737909240"}
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["cache-control"] == "no-cache"
    assert "&lt;alice&gt; " in response.text
    assert "[2025.01.26 16:34]" in response.text


def test_preview_message_defaults():
    response = client.get("/api/preview-nft")
    assert "&lt;anon&gt; " in response.text
    assert "Hello, Public" in response.text


def test_preview_feed_sample():
    response = client.get("/api/preview-nft", params={"type": "feed"})
    assert response.status_code == 200
    assert "&lt;vitalik.eth&gt;" in response.text
    assert fake_ledger.requested == []


def test_preview_post_feed():
    body = {
        "type": "feed",
        "messages": [{"username": "bob", "text": "gm", "timestamp": 1737909240, "color": "FF0000"}],
    }
    response = client.post("/api/preview-nft", json=body)
    assert response.status_code == 200
    assert '<tspan fill="#FF0000" class="usr">&lt;bob&gt;</tspan>' in response.text


def test_preview_post_message():
    response = client.post("/api/preview-nft", json={"username": "carol", "text": "posted", "timestamp": 0})
    assert "&lt;carol&gt; " in response.text
    assert "[1970.01.01 00:00]" in response.text


@pytest.mark.parametrize(
    "content",
    ["not json", '{"type": "poster"}', '{"timestamp": "soon"}', "[1, 2]"],
)
def test_preview_post_invalid(content):
    response = client.post("/api/preview-nft", content=content, headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


# ── Metadata ──


def test_metadata():
    response = client.get("/api/metadata/10")
    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=600"
    data = response.json()
    assert data["name"] == "PUBLIC_TERMINAL #10"
    assert data["description"] == "message number 10"
    attrs = {a["trait_type"]: a["value"] for a in data["attributes"]}
    assert attrs == {
        "Author": "user10",
        "FID": "1010",
        "Color": "#00ff00",
        "Timestamp": "2025-01-26T16:44:00.000Z",
    }
    assert data["external_url"].endswith("/artifact/10")


@pytest.mark.parametrize("record_id", ["abc", "0", "-1"])
def test_metadata_bad_id(record_id):
    response = client.get(f"/api/metadata/{record_id}")
    assert response.status_code == 400
    assert response.json() == {"error": "bad id"}


def test_metadata_not_found():
    response = client.get("/api/metadata/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Message not found"}


@pytest.mark.parametrize("color", ['00FF00" onload="alert(1)', "red", "#12345", "00FF00><script>"])
def test_preview_post_rejects_bad_feed_color(color):
    body = {
        "type": "feed",
        "messages": [{"username": "bob", "text": "gm", "timestamp": 1737909240, "color": color}],
    }
    response = client.post("/api/preview-nft", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


def test_preview_post_accepts_hash_color():
    body = {
        "type": "feed",
        "messages": [{"username": "bob", "text": "gm", "timestamp": 1737909240, "color": "#00ffcc"}],
    }
    response = client.post("/api/preview-nft", json=body)
    assert response.status_code == 200
    assert '<tspan fill="#00ffcc" class="usr">' in response.text

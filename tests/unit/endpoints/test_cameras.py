"""
Tests for fleet_sim.api.endpoints.cameras, dashboard and health.

Uses httpx.AsyncClient + ASGITransport against throwaway apps whose store
dependency is overridden with a seeded FleetStore.
"""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from fleet_sim.api.deps import get_fleet_store
from fleet_sim.api.endpoints import cameras, dashboard, health
from fleet_sim.schemas.camera import Camera


# ── Helpers ──────────────────────────────────────────────────────


def _create_app(store=None):
    """Build a minimal app with the read-only routers."""
    app = FastAPI()
    app.include_router(health.router, prefix="/api")
    app.include_router(cameras.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    if store is not None:
        app.dependency_overrides[get_fleet_store] = lambda: store
    return app


def _client(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ══════════════════════════════════════════════════════════════════
# GET /api/health
# ══════════════════════════════════════════════════════════════════


class TestHealth:
    @pytest.mark.asyncio
    async def test_ok(self):
        async with _client(_create_app()) as client:
            resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"ok": True}


# ══════════════════════════════════════════════════════════════════
# GET /api/cameras
# ══════════════════════════════════════════════════════════════════


class TestListCameras:
    @pytest.mark.asyncio
    async def test_returns_whole_snapshot(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras")

        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 30
        assert [c["id"] for c in body] == list(range(30))

    @pytest.mark.asyncio
    async def test_record_shape(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras")

        first = resp.json()[0]
        assert set(first) == {
            "id", "name", "site", "status", "ip", "vlan", "firmwareVersion",
        }
        assert first["status"] == "online"
        assert Camera.model_validate(first).id == 0

    @pytest.mark.asyncio
    async def test_limit(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras", params={"limit": 5})
        assert [c["id"] for c in resp.json()] == [0, 1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_negative_limit_rejected(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras", params={"limit": -1})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_site_filter(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras", params={"site": "T5"})

        assert resp.status_code == 200
        expected = [c.id for c in store.current_snapshot() if c.site == "T5"]
        assert [c["id"] for c in resp.json()] == expected
        assert all(c["site"] == "T5" for c in resp.json())

    @pytest.mark.asyncio
    async def test_unknown_site_filter_404(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras", params={"site": "MARS"})
        assert resp.status_code == 404
        assert "MARS" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_reflects_ticks(self, store):
        app = _create_app(store)
        for _ in range(5):
            store.apply_tick()
        async with _client(app) as client:
            resp = await client.get("/api/cameras")
        body = resp.json()
        snapshot = store.current_snapshot()
        assert [c["ip"] for c in body] == [c.ip for c in snapshot]


# ══════════════════════════════════════════════════════════════════
# GET /api/cameras/{camera_id}
# ══════════════════════════════════════════════════════════════════


class TestGetCamera:
    @pytest.mark.asyncio
    async def test_found(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras/3")
        assert resp.status_code == 200
        assert resp.json()["id"] == 3

    @pytest.mark.asyncio
    async def test_not_found(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/cameras/999")
        assert resp.status_code == 404


# ══════════════════════════════════════════════════════════════════
# GET /api/summary
# ══════════════════════════════════════════════════════════════════


class TestSummary:
    @pytest.mark.asyncio
    async def test_fresh_fleet(self, store):
        async with _client(_create_app(store)) as client:
            resp = await client.get("/api/summary")

        assert resp.status_code == 200
        assert resp.json() == {
            "total": 30,
            "offline": 0,
            "online": 30,
            "dhcpFail": 0,
            "wrongVlan": 0,
            "oldFw": 0,
        }

    @pytest.mark.asyncio
    async def test_consistent_after_ticks(self, store):
        for _ in range(10):
            store.apply_tick()
        async with _client(_create_app(store)) as client:
            body = (await client.get("/api/summary")).json()
        assert body["online"] + body["offline"] == body["total"] == 30
        assert body == store.summary().model_dump(by_alias=True)

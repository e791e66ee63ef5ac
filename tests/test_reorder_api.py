"""
API tests: reorder analysis, summaries, demand-spike simulation, seeding,
health, and the Redis-backed analysis cache.
"""

import json
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from tests.utils import product_payload
from warehouse.api.deps import redis_dep
from warehouse.core.config import get_settings
from warehouse.domain.services.reorder_analysis_svc import REORDER_ANALYSIS_CACHE_KEY
from warehouse.main import app


async def _seed_mix(client: AsyncClient):
    # ok / high
    await client.post("/api/products", json=product_payload(product_id="A", criticality="high"))
    # reorder / low
    await client.post("/api/products", json=product_payload(
        product_id="B", criticality="low", current_stock=8, average_daily_sales=4.1, supplier_lead_time=9,
    ))
    # no consumption / medium
    await client.post("/api/products", json=product_payload(
        product_id="C", criticality="medium", average_daily_sales=0,
    ))


@pytest.mark.asyncio
class TestReorderAnalysisAPI:

    async def test_ranked_analysis(self, client: AsyncClient):
        await _seed_mix(client)
        resp = await client.get("/api/reorder-analysis")
        assert resp.status_code == 200
        data = resp.json()
        assert [a["product_id"] for a in data] == ["B", "A", "C"]
        assert data[0]["needs_reorder"] is True
        assert data[0]["days_remaining"] == 1
        assert data[2]["days_remaining"] == "Unlimited"
        assert data[2]["needs_reorder"] is False
        assert data[2]["optimal_reorder_quantity"] == 0

    async def test_filter_and_sort(self, client: AsyncClient):
        await _seed_mix(client)
        resp = await client.get("/api/reorder-analysis", params={"filter_by": "needs_reorder"})
        assert [a["product_id"] for a in resp.json()] == ["B"]
        resp = await client.get("/api/reorder-analysis", params={"sort_by": "days_remaining"})
        assert [a["product_id"] for a in resp.json()] == ["B", "A", "C"]

    async def test_bad_query_option(self, client: AsyncClient):
        resp = await client.get("/api/reorder-analysis", params={"sort_by": "name"})
        assert resp.status_code == 400

    async def test_single_product(self, client: AsyncClient):
        await _seed_mix(client)
        resp = await client.get("/api/reorder-analysis/A")
        assert resp.status_code == 200
        data = resp.json()
        assert data["days_remaining"] == 14
        assert data["safety_threshold"] == 12
        assert data["needs_reorder"] is False
        assert (await client.get("/api/reorder-analysis/NOPE")).status_code == 404

    async def test_summaries(self, client: AsyncClient):
        await _seed_mix(client)
        summary = (await client.get("/api/reorder-analysis/summary")).json()
        assert summary["total_products"] == 3
        assert summary["needs_reorder"] == 1
        assert summary["critical_reorders"] == 0
        dashboard = (await client.get("/api/dashboard/summary")).json()
        assert dashboard["total_products"] == 3
        assert dashboard["low_stock"] == 1
        assert dashboard["critical_items"] == 1


@pytest.mark.asyncio
class TestSpikeAPI:

    async def test_simulation(self, client: AsyncClient):
        await client.post("/api/products", json=product_payload(
            current_stock=100, average_daily_sales=2, supplier_lead_time=7,
        ))
        resp = await client.post("/api/simulate-demand-spike", json={
            "product_id": "PROD-001", "spike_multiplier": 3, "spike_duration": 10,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["product_name"] == "Wireless Bluetooth Headphones"
        assert data["original"]["days_remaining"] == 50
        assert data["after_spike"]["stock_after_spike"] == 40
        assert data["after_spike"]["new_average_daily_sales"] == 3.33
        assert data["after_spike"]["needs_reorder"] is True
        assert data["spike_details"]["total_consumption_during_spike"] == 60
        assert data["spike_details"]["stock_depletion"] == 60

    async def test_missing_fields(self, client: AsyncClient):
        resp = await client.post("/api/simulate-demand-spike", json={"product_id": "PROD-001"})
        assert resp.status_code == 400
        assert "Missing required fields" in resp.json()["detail"]

    async def test_non_positive(self, client: AsyncClient):
        resp = await client.post("/api/simulate-demand-spike", json={
            "product_id": "PROD-001", "spike_multiplier": -1, "spike_duration": 10,
        })
        assert resp.status_code == 400

    async def test_unknown_product(self, client: AsyncClient):
        resp = await client.post("/api/simulate-demand-spike", json={
            "product_id": "NOPE", "spike_multiplier": 2, "spike_duration": 10,
        })
        assert resp.status_code == 404

    async def test_zero_stock_depletion_is_null(self, client: AsyncClient):
        await client.post("/api/products", json=product_payload(current_stock=0))
        resp = await client.post("/api/simulate-demand-spike", json={
            "product_id": "PROD-001", "spike_multiplier": 2, "spike_duration": 5,
        })
        assert resp.status_code == 200
        assert resp.json()["spike_details"]["stock_depletion"] is None

    @pytest.mark.parametrize(
        "multiplier,duration",
        [(float("nan"), 10), (float("inf"), 10), (2, float("inf")), (1e307, 100)],
    )
    async def test_non_finite_or_overflowing_is_invalid(self, client: AsyncClient, multiplier, duration):
        await client.post("/api/products", json=product_payload())
        # stdlib json writes NaN/Infinity tokens, which the API parser accepts
        body = json.dumps({"product_id": "PROD-001", "spike_multiplier": multiplier, "spike_duration": duration})
        resp = await client.post(
            "/api/simulate-demand-spike", content=body, headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        json.dumps(resp.json(), allow_nan=False)


@pytest.mark.asyncio
class TestSeedAPI:

    async def test_seed_replaces_catalog(self, client: AsyncClient):
        await client.post("/api/products", json=product_payload(product_id="OLD"))
        resp = await client.post("/api/seed-data")
        assert resp.status_code == 201
        data = resp.json()
        assert data["count"] == 40
        ids = {p["product_id"] for p in (await client.get("/api/products")).json()}
        assert "OLD" not in ids
        assert len(ids) == 40

        analysis = (await client.get("/api/reorder-analysis")).json()
        first = analysis[0]
        assert first["needs_reorder"] is True
        assert first["criticality"] == "high"
        speaker = next(a for a in analysis if a["product_id"] == "PROD-009")
        assert speaker["days_remaining"] == 1
        assert speaker["needs_reorder"] is True


@pytest.mark.asyncio
class TestAnalysisCache:

    async def test_served_from_cache(self, client: AsyncClient):
        cached = [{
            **product_payload(product_id="CACHED"),
            "last_updated": None,
            "days_remaining": "Unlimited",
            "safety_threshold": 12,
            "needs_reorder": False,
            "optimal_reorder_quantity": 0,
            "estimated_cost": 0,
            "urgency": "ok",
        }]
        redis = AsyncMock()
        redis.get.return_value = json.dumps(cached)
        app.dependency_overrides[redis_dep] = lambda: redis

        resp = await client.get("/api/reorder-analysis")
        assert [a["product_id"] for a in resp.json()] == ["CACHED"]
        redis.get.assert_awaited_with(REORDER_ANALYSIS_CACHE_KEY)

    async def test_miss_populates_and_writes_invalidate(self, client: AsyncClient):
        redis = AsyncMock()
        redis.get.return_value = None
        app.dependency_overrides[redis_dep] = lambda: redis

        await client.post("/api/products", json=product_payload())
        redis.delete.assert_awaited_with(REORDER_ANALYSIS_CACHE_KEY)

        resp = await client.get("/api/reorder-analysis")
        assert resp.status_code == 200
        key, payload = redis.set.await_args.args
        assert key == REORDER_ANALYSIS_CACHE_KEY
        assert json.loads(payload)[0]["product_id"] == "PROD-001"

    async def test_redis_errors_fall_back_to_store(self, client: AsyncClient):
        redis = AsyncMock()
        redis.get.side_effect = ConnectionError("down")
        redis.set.side_effect = ConnectionError("down")
        app.dependency_overrides[redis_dep] = lambda: redis

        await client.post("/api/products", json=product_payload())
        resp = await client.get("/api/reorder-analysis")
        assert resp.status_code == 200
        assert resp.json()[0]["product_id"] == "PROD-001"


@pytest.mark.asyncio
class TestHealthAPI:

    async def test_health_ok(self, client: AsyncClient, monkeypatch):
        fake_db = AsyncMock()
        monkeypatch.setattr("warehouse.db.mongo.get_db", lambda: fake_db)
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["checks"]["mongodb"] == "ok"
        assert data["checks"]["redis"] == "skipped"
        assert data["checks"]["version"] == get_settings().GIT_SHA

    async def test_health_reports_mongo_error(self, client: AsyncClient):
        resp = await client.get("/api/health")
        data = resp.json()
        assert data["status"] == "error"
        assert data["checks"]["mongodb"].startswith("error")

"""Tests for workout API endpoints."""

from datetime import UTC, timedelta

import pytest
from httpx import AsyncClient

from snatched.analytics.service import AnalyticsService
from snatched.main import app
from snatched.store.sql import SqlRecordStore
from tests.conftest import NOW, FixedClock, UnavailableStore, make_record, test_session

# ── POST /api/workouts/estimate ─────────────────────────────────────


async def test_estimate_stair_master(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts/estimate",
        json={
            "workout_type": "stairMaster",
            "level_or_speed": 5,
            "duration_minutes": 20,
            "weight": 70,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["steps"] == 3000
    assert data["calories_burned"] == pytest.approx(119.0)


async def test_estimate_treadmill_in_pounds(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts/estimate",
        json={
            "workout_type": "treadmill",
            "level_or_speed": 4,
            "incline": 0,
            "duration_minutes": 30,
            "weight": 100,
            "weight_unit": "lb",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["steps"] == 4000
    # 0.1 * 45.359237 kg * 30 min
    assert data["calories_burned"] == pytest.approx(136.077711)


async def test_estimate_invalid_duration(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts/estimate",
        json={
            "workout_type": "stairMaster",
            "level_or_speed": 5,
            "duration_minutes": 0,
            "weight": 70,
        },
    )
    assert response.status_code == 422
    assert "Duration" in response.json()["detail"]


async def test_estimate_unknown_unit(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts/estimate",
        json={
            "workout_type": "stairMaster",
            "level_or_speed": 5,
            "duration_minutes": 10,
            "weight": 70,
            "weight_unit": "stone",
        },
    )
    assert response.status_code == 422


# ── POST /api/workouts ──────────────────────────────────────────────


async def test_save_workout_updates_analytics(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts",
        json={"workout_type": "treadmill", "steps": 4000, "calories_burned": 210.0},
    )
    assert response.status_code == 201
    saved = response.json()
    assert saved["workout_type"] == "treadmill"
    assert saved["steps"] == 4000
    assert saved["id"]

    snapshot = (await client.get("/api/analytics")).json()
    assert snapshot["overall"]["total_workouts"] == 1
    assert snapshot["overall"]["favorite_workout_type"] == "treadmill"
    assert snapshot["recent_records"][0]["id"] == saved["id"]


async def test_save_workout_rejects_negative_steps(client: AsyncClient) -> None:
    response = await client.post(
        "/api/workouts",
        json={"workout_type": "treadmill", "steps": -1, "calories_burned": 10.0},
    )
    assert response.status_code == 422


async def test_save_workout_store_unavailable(client: AsyncClient) -> None:
    store = UnavailableStore()
    app.state.record_store = store
    app.state.analytics = AnalyticsService(store, tz=UTC, clock=FixedClock())

    response = await client.post(
        "/api/workouts",
        json={"workout_type": "stairMaster", "steps": 3000, "calories_burned": 119.0},
    )
    assert response.status_code == 503
    assert "disk on fire" in response.json()["detail"]

    listing = await client.get("/api/workouts")
    assert listing.status_code == 503


# ── GET /api/workouts ───────────────────────────────────────────────


async def test_list_workouts_newest_first(client: AsyncClient) -> None:
    store = SqlRecordStore(test_session)
    for hours in (5, 1, 3):
        await store.append(make_record(NOW - timedelta(hours=hours)))

    response = await client.get("/api/workouts?limit=2")
    assert response.status_code == 200
    items = response.json()
    assert len(items) == 2
    assert items[0]["timestamp"].startswith("2025-03-15T11:00:00")
    assert items[1]["timestamp"].startswith("2025-03-15T09:00:00")


async def test_list_workouts_empty(client: AsyncClient) -> None:
    response = await client.get("/api/workouts")
    assert response.status_code == 200
    assert response.json() == []

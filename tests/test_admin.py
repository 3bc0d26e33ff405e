"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from habit_tracker.api.app import create_app
from habit_tracker.containers import AppContainer

HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_health_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health").status_code == 401
    wrong = client.get("/admin/health", headers={"X-Admin-Token": "no"})
    assert wrong.status_code == 401


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_seed_stats_and_clear(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    seeded = client.post("/admin/seed", params={"days": 2, "seed": 5}, headers=HEADERS)
    stats = client.get("/admin/stats", headers=HEADERS).json()
    cleared = client.delete("/admin/records", headers=HEADERS)

    assert seeded.json()["added"] == 6
    assert stats["records"] == 6
    assert stats["habits"] == 3
    assert cleared.status_code == 200
    assert container.record_store.count() == 0

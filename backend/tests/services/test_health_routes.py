"""Readiness check: reports database reachability through the envelope."""

import lifelink.infrastructure.database as db_module


async def test_ready_when_database_answers(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": {"database": "healthy"}}


async def test_not_ready_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"success": False, "message": "Database unavailable"}

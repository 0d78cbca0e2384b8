"""Health Probes — liveness always up, readiness depends on the database manager."""

from trisog import __version__


async def test_liveness(client):
    res = await client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "trisog-api", "version": __version__,
    }


async def test_readiness_without_database(client):
    """The test client skips the lifespan, so no manager exists."""
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_database(client, monkeypatch):
    from trisog.infrastructure import database

    manager = database.DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(database, "db_manager", manager)
    try:
        res = await client.get("/api/v1/health/ready")
    finally:
        await manager.dispose()
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}

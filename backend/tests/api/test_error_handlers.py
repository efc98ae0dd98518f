"""Error Handlers - domain errors and validation errors become JSON envelopes.

Uses a bare FastAPI app with the same handlers so failure paths can be
triggered without a database.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from blog_api.api.error_handlers import register_error_handlers
from blog_api.core.errors import DatabaseError, IdMismatchError


@pytest.fixture
async def bare_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/db-down")
    async def db_down():
        raise DatabaseError("Connection or operational error", "execute")

    @app.get("/mismatch")
    async def mismatch():
        raise IdMismatchError("a", "b")

    @app.get("/typed/{n}")
    async def typed(n: int):
        return {"n": n}

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_database_error_maps_to_503(bare_client):
    res = await bare_client.get("/db-down")

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["severity"] == "critical"
    assert error["context"]["operation"] == "execute"


async def test_domain_validation_error_maps_to_400(bare_client):
    res = await bare_client.get("/mismatch")

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ID_MISMATCH"


async def test_request_validation_error_has_details(bare_client):
    res = await bare_client.get("/typed/abc")

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "path.n"

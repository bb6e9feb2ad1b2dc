"""Operational endpoints and cross-cutting middleware."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from mototrack.db.database import get_db
from mototrack.main import create_app


class UnreachableSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


class TestOperationalEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"]["healthy"] is True

    @pytest.mark.asyncio
    async def test_health_is_unavailable_without_database(self):
        app = create_app()

        async def override_get_db():
            yield UnreachableSession()

        app.dependency_overrides[get_db] = override_get_db
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"]["healthy"] is False

    @pytest.mark.asyncio
    async def test_metrics_exposes_request_counters(self, client):
        await client.get("/motos")
        await client.get("/motos/filtro", params={"placa": "abc"})

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'endpoint="/motos"' in response.text
        assert 'endpoint="/motos/filtro"' in response.text
        assert 'filter_queries_total{entity="moto"}' in response.text

    @pytest.mark.asyncio
    async def test_unknown_paths_share_one_label(self, client):
        await client.get("/nao-existe/8f3a")

        response = await client.get("/metrics")

        assert 'endpoint="unmatched"' in response.text
        assert "/nao-existe/8f3a" not in response.text


class TestRequestId:
    @pytest.mark.asyncio
    async def test_generated_when_absent(self, client):
        response = await client.get("/health")

        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_echoed_and_put_on_errors(self, client):
        response = await client.get("/motos/404", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["meta"]["request_id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_put_on_unhandled_errors(self):
        app = create_app()

        @app.get("/falha")
        async def falha():
            raise RuntimeError("boom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/falha", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"
        assert response.json()["errors"][0]["code"] == "INTERNAL_ERROR"
        assert response.json()["meta"]["request_id"] == "req-500"


class TestCors:
    @pytest.mark.asyncio
    async def test_front_end_origin_is_allowed(self, client):
        response = await client.options("/motos", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        })

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

"""
Tests for the FastAPI gateway and health routes.

Run with: pytest tests/test_http_gateway.py -v
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from todo_service.fastapi_app import create_fastapi_app
from todo_service.presentation.api.health import ROOT_MESSAGE, _database_report


@pytest.fixture()
def app(container, config):
    return create_fastapi_app(container, config)


@pytest.fixture()
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestTodoRoutes:
    async def test_crud_flow(self, client):
        res = await client.post("/v1/todos", json={"todoName": "  Task  "})
        assert res.status_code == 200
        body = res.json()
        assert body["status"]["code"] == 201
        todo_id = body["id"]

        res = await client.get(f"/v1/todos/{todo_id}")
        assert res.json()["data"] == {"id": todo_id, "todoName": "Task"}

        res = await client.put(f"/v1/todos/{todo_id}", json={"todoName": "Renamed"})
        assert res.json()["status"]["message"] == "Record updated successfully."

        res = await client.get("/v1/todos")
        assert [todo["todoName"] for todo in res.json()["data"]] == ["Renamed"]

        res = await client.delete(f"/v1/todos/{todo_id}")
        assert res.json()["status"]["message"] == "Record deleted successfully."

    async def test_envelope_failures_use_http_200(self, client):
        res = await client.get("/v1/todos/999")

        assert res.status_code == 200
        assert res.json()["status"] == {
            "success": False,
            "code": 404,
            "message": "No record found",
            "errors": [],
        }

    async def test_validation_envelope(self, client):
        res = await client.post("/v1/todos", json={"todoName": ""})

        assert res.json()["status"]["code"] == 400
        assert res.json()["status"]["errors"] == ["TodoName is required."]

    async def test_malformed_path_is_400(self, client):
        res = await client.get("/v1/todos/not-a-number")

        assert res.status_code == 400
        assert res.json()["status"]["message"] == "Validation error occurred"

    @pytest.mark.parametrize(
        "method, json",
        [("GET", None), ("DELETE", None), ("PUT", {"todoName": "Renamed"})],
    )
    @pytest.mark.parametrize("todo_id", [2**63, 2**31, -(2**31) - 1])
    async def test_id_outside_int32_is_400(self, client, method, json, todo_id):
        res = await client.request(method, f"/v1/todos/{todo_id}", json=json)

        assert res.status_code == 400
        assert res.json()["status"]["message"] == "Validation error occurred"

    async def test_largest_int32_id_is_not_found(self, client):
        todo_id = 2**31 - 1

        assert (await client.get(f"/v1/todos/{todo_id}")).json()["status"]["code"] == 404
        assert (await client.delete(f"/v1/todos/{todo_id}")).json()["status"]["code"] == 422
        res = await client.put(f"/v1/todos/{todo_id}", json={"todoName": "Renamed"})
        assert res.json()["status"]["code"] == 422

    async def test_correlation_id_header(self, client):
        res = await client.get("/v1/todos", headers={"X-Correlation-Id": "abc-123"})
        assert res.headers["X-Correlation-Id"] == "abc-123"

        res = await client.get("/v1/todos")
        assert res.headers["X-Correlation-Id"]


class TestHealthRoutes:
    async def test_root_notice(self, client):
        res = await client.get("/")

        assert res.status_code == 200
        assert res.text == ROOT_MESSAGE

    @pytest.mark.parametrize("path", ["/health", "/health/ready"])
    async def test_database_healthy(self, client, path):
        res = await client.get(path)

        assert res.status_code == 200
        assert res.json()["status"] == "Healthy"

    async def test_live(self, client):
        res = await client.get("/health/live")

        assert res.status_code == 200

    async def test_database_unhealthy_is_503(self):
        db = AsyncMock()
        db.health_check.return_value = False

        res = await _database_report(db)

        assert res.status_code == 503


class TestErrorHandlers:
    async def test_unhandled_error_is_generic_500(self, app):
        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret detail")

        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            res = await client.get("/boom")

        assert res.status_code == 500
        assert res.json() == {"error": "An unexpected error occurred."}

    async def test_timeout_is_504(self, app, client):
        @app.get("/slow")
        async def slow():
            raise TimeoutError()

        res = await client.get("/slow")

        assert res.status_code == 504

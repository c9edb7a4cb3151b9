from datetime import datetime

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Server is running"
    datetime.fromisoformat(body["timestamp"])


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


@pytest.mark.parametrize("method", ["DELETE", "PATCH"])
def test_unsupported_method_on_known_path_is_route_not_found(client, jane, method):
    response = client.request(method, "/api/service-requests/abc", headers=jane["headers"])

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def test_unsupported_method_on_collection_is_route_not_found(client):
    response = client.delete("/api/service-requests")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def test_unhandled_error_hides_details(app):
    router = APIRouter()

    @router.get("/api/explode")
    def explode():
        raise RuntimeError("secret internals")

    app.include_router(router)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/explode")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert "secret" not in response.text


def test_malformed_json_is_validation_error(client, jane):
    response = client.post(
        "/api/service-requests",
        content="{not json",
        headers={**jane["headers"], "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_cors_preflight(client):
    response = client.options(
        "/api/service-requests",
        headers={
            "Origin": "http://localhost:8081",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"

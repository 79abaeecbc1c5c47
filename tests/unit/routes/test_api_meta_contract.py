import pytest


@pytest.mark.unit
def test_health_ping(client) -> None:
    response = client.get("/api/health/ping")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


@pytest.mark.unit
def test_openapi_json_lists_user_paths(client) -> None:
    response = client.get("/api/openapi.json")

    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert "/users" in paths
    assert "/users/{user_id}" in paths
    assert "/users/page" in paths


@pytest.mark.unit
def test_request_id_header_is_echoed(client) -> None:
    response = client.get("/api/health/ping", headers={"X-Request-ID": "req-abc-123"})

    assert response.headers["X-Request-ID"] == "req-abc-123"


@pytest.mark.unit
def test_invalid_request_id_is_replaced(client) -> None:
    response = client.get("/api/health/ping", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"].startswith("req_")


@pytest.mark.unit
def test_cors_allows_configured_origin(client) -> None:
    response = client.get("/api/users", headers={"Origin": "http://localhost:5173"})

    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"

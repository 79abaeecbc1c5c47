import pytest
from flask import Response

from userdir import create_app
from userdir.core.exceptions import NotFoundError
from userdir.settings import Settings
from userdir.utils.response_utils import jsonify_resource, unified_error_response


@pytest.fixture
def app():
    return create_app(settings=Settings.load())


@pytest.mark.unit
def test_jsonify_resource_returns_complete_response(app) -> None:
    with app.app_context():
        response = jsonify_resource({"a": 1}, status=201)

    assert isinstance(response, Response)
    assert response.status_code == 201
    assert response.get_json() == {"a": 1}


@pytest.mark.unit
def test_jsonify_resource_serializes_lists(app) -> None:
    with app.app_context():
        response = jsonify_resource([{"id": 1}, {"id": 2}])

    assert response.status_code == 200
    assert response.get_json() == [{"id": 1}, {"id": 2}]


@pytest.mark.unit
def test_unified_error_response_uses_mapped_status(app) -> None:
    with app.test_request_context("/api/users/9"):
        payload, status = unified_error_response(NotFoundError(message_key="USER_NOT_FOUND"))

    assert status == 404
    assert payload["success"] is False
    assert payload["message_code"] == "USER_NOT_FOUND"
    assert payload["context"]["url"] == "/api/users/9"


@pytest.mark.unit
def test_success_routes_render_json_bodies(app) -> None:
    client = app.test_client()

    response = client.get("/api/health/ping")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}

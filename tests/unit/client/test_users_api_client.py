import pytest
import requests

from userdir.client.api_client import ApiClientError, UsersApiClient

USER_JSON = {
    "id": 1,
    "name": "Alice",
    "email": "alice@example.com",
    "phone": "0812345678",
    "department": "HR",
    "active": True,
    "createdAt": "2026-01-01T00:00:00+00:00",
    "updatedAt": "2026-01-01T00:00:00+00:00",
}


class _FakeResponse:
    def __init__(self, status_code: int, payload: object = None) -> None:
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class _FakeSession(requests.Session):
    def __init__(self, responses) -> None:
        super().__init__()
        self._responses = list(responses)
        self.calls: list[tuple[str, str, dict]] = []

    def request(self, method, url, **kwargs):  # type: ignore[override]
        self.calls.append((method, url, kwargs))
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.mark.unit
def test_get_users_parses_records() -> None:
    session = _FakeSession([_FakeResponse(200, [USER_JSON])])
    client = UsersApiClient("http://api.test/api/", timeout=3, session=session)

    records = client.get_users()

    assert [record.email for record in records] == ["alice@example.com"]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://api.test/api/users")
    assert kwargs["timeout"] == 3


@pytest.mark.unit
def test_add_user_posts_json() -> None:
    session = _FakeSession([_FakeResponse(201, USER_JSON)])
    client = UsersApiClient("http://api.test/api", session=session)

    record = client.add_user({"name": "Alice"})

    assert record.id == 1
    assert session.calls[0][0] == "POST"
    assert session.calls[0][2]["json"] == {"name": "Alice"}


@pytest.mark.unit
def test_delete_user_returns_echoed_record() -> None:
    session = _FakeSession([_FakeResponse(200, {"message": "User deleted successfully", "user": USER_JSON})])

    record = UsersApiClient("http://api.test/api", session=session).delete_user(1)

    assert record is not None
    assert record.id == 1
    assert session.calls[0][:2] == ("DELETE", "http://api.test/api/users/1")


@pytest.mark.unit
def test_non_2xx_raises_with_server_message() -> None:
    session = _FakeSession([_FakeResponse(409, {"message": "Email already in use", "success": False})])
    client = UsersApiClient("http://api.test/api", session=session)

    with pytest.raises(ApiClientError) as exc:
        client.update_user(1, {"email": "dup@example.com"})

    assert exc.value.status_code == 409
    assert exc.value.message == "Email already in use"
    assert exc.value.server_message == "Email already in use"


@pytest.mark.unit
def test_non_json_error_uses_status_text() -> None:
    session = _FakeSession([_FakeResponse(502)])

    with pytest.raises(ApiClientError) as exc:
        UsersApiClient("http://api.test/api", session=session).get_user(1)

    assert exc.value.status_code == 502
    assert exc.value.message == "HTTP 502"
    assert exc.value.server_message is None


@pytest.mark.unit
def test_connection_error_has_no_status_code() -> None:
    session = _FakeSession([requests.ConnectionError("refused")])

    with pytest.raises(ApiClientError) as exc:
        UsersApiClient("http://api.test/api", session=session).get_users()

    assert exc.value.status_code is None
    assert exc.value.server_message is None

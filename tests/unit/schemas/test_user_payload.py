import pytest

from userdir.core.exceptions import ValidationError
from userdir.schemas.users import UserPayload
from userdir.schemas.validation import validate_or_raise


def _payload(**overrides):
    data = {
        "name": "Alice",
        "email": "alice@example.com",
        "phone": "+6281234567890",
        "department": "Technology",
        "active": True,
    }
    data.update(overrides)
    return data


@pytest.mark.unit
def test_user_payload_strips_and_defaults_active() -> None:
    data = _payload(name="  Alice  ", email=" alice@example.com ", department=" HR ")
    data.pop("active")

    payload = validate_or_raise(UserPayload, data)

    assert payload.name == "Alice"
    assert payload.email == "alice@example.com"
    assert payload.department == "HR"
    assert payload.active is True


@pytest.mark.unit
def test_user_payload_lowercases_email() -> None:
    payload = validate_or_raise(UserPayload, _payload(email=" Alice@Example.COM "))

    assert payload.email == "alice@example.com"


@pytest.mark.unit
def test_user_payload_ignores_unknown_and_read_only_fields() -> None:
    payload = validate_or_raise(UserPayload, _payload(id=99, createdAt="2026-01-01", role="admin"))

    assert not hasattr(payload, "role")
    assert "id" not in payload.model_dump()


@pytest.mark.unit
@pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("yes", True), (0, False)])
def test_user_payload_parses_truthy_strings(raw, expected) -> None:
    assert validate_or_raise(UserPayload, _payload(active=raw)).active is expected


@pytest.mark.unit
@pytest.mark.parametrize("phone", ["0812345678", "+081234567890123", "123456789012345"])
def test_user_payload_accepts_valid_phone(phone) -> None:
    assert validate_or_raise(UserPayload, _payload(phone=phone)).phone == phone


@pytest.mark.unit
@pytest.mark.parametrize("phone", ["081234567", "1234567890123456", "08-1234-5678", "++0812345678"])
def test_user_payload_rejects_invalid_phone(phone) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_or_raise(UserPayload, _payload(phone=phone))

    assert exc.value.message.startswith("Validation failed: phone:")


@pytest.mark.unit
@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@example.com", ""])
def test_user_payload_rejects_invalid_email(email) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_or_raise(UserPayload, _payload(email=email))

    assert "email" in exc.value.message


@pytest.mark.unit
def test_user_payload_requires_full_shape() -> None:
    data = _payload()
    data.pop("department")

    with pytest.raises(ValidationError) as exc:
        validate_or_raise(UserPayload, data)

    assert exc.value.message == "Validation failed: department: Field required"


@pytest.mark.unit
def test_user_payload_rejects_blank_name_and_lists_all_errors() -> None:
    with pytest.raises(ValidationError) as exc:
        validate_or_raise(UserPayload, _payload(name="   ", phone="abc"))

    assert exc.value.message == "Validation failed: name: Name is required"
    fields = [issue["field"] for issue in exc.value.extra["errors"]]
    assert fields == ["name", "phone"]


@pytest.mark.unit
@pytest.mark.parametrize("body", [None, [], "text"])
def test_user_payload_rejects_non_object_body(body) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_or_raise(UserPayload, body)

    assert exc.value.message == "Validation failed: Request body must be a JSON object"

"""用户写路径 schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import StrictStr, field_validator, model_validator

from userdir.constants.user_fields import (
    DEPARTMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    PHONE_PATTERN,
)
from userdir.schemas.base import PayloadSchema
from userdir.utils.payload_converters import as_bool


def _ensure_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("Request body must be a JSON object")
    return data


def _require_text(value: str, *, label: str, max_length: int) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{label} is required")
    if len(cleaned) > max_length:
        raise ValueError(f"{label} must be at most {max_length} characters")
    return cleaned


class UserPayload(PayloadSchema):
    """创建/更新用户 payload.

    POST 与 PUT 共用同一形状: PUT 也必须提交完整字段.
    """

    name: StrictStr
    email: StrictStr
    phone: StrictStr
    department: StrictStr
    active: bool = True

    @model_validator(mode="before")
    @classmethod
    def _validate_shape(cls, data: Any) -> Any:
        return _ensure_mapping(data)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _require_text(value, label="Name", max_length=NAME_MAX_LENGTH)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        cleaned = _require_text(value, label="Email", max_length=EMAIL_MAX_LENGTH)
        if not EMAIL_PATTERN.match(cleaned):
            raise ValueError("Invalid email address")
        return cleaned.lower()

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Phone is required")
        if not PHONE_PATTERN.match(cleaned):
            raise ValueError("Phone must contain 10 to 15 digits")
        return cleaned

    @field_validator("department")
    @classmethod
    def _validate_department(cls, value: str) -> str:
        return _require_text(value, label="Department", max_length=DEPARTMENT_MAX_LENGTH)

    @field_validator("active", mode="before")
    @classmethod
    def _parse_active(cls, value: Any) -> bool:
        if value is None:
            return True
        return as_bool(value, default=True)

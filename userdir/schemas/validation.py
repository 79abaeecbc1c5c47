"""Schema 校验与错误映射."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from userdir.constants.system_constants import ErrorMessages
from userdir.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(model: type[ModelT], payload: object) -> ModelT:
    """执行 schema 校验并抛出项目的 ValidationError.

    错误文案取第一条字段错误: "Validation failed: <field>: <detail>";
    全部错误列在 `extra.errors` 中,随错误封套返回给客户端.

    Args:
        model: pydantic model.
        payload: 待校验的 payload(通常为 request JSON 或 reqparse 结果).

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        issues = [_describe_error(error) for error in exc.errors()]
        first = issues[0] if issues else {"field": None, "detail": ErrorMessages.INVALID_REQUEST}
        raise ValidationError(
            _format_message(first["field"], first["detail"]),
            extra={"errors": issues},
        ) from None


def _format_message(field: str | None, detail: str | None) -> str:
    parts = [ErrorMessages.VALIDATION_ERROR]
    if field:
        parts.append(field)
    if detail:
        parts.append(detail)
    return ": ".join(parts)


def _describe_error(error: ErrorDetails) -> dict[str, str | None]:
    field = None
    loc = error.get("loc")
    if isinstance(loc, tuple) and loc and isinstance(loc[0], str):
        field = loc[0]

    ctx = error.get("ctx")
    if isinstance(ctx, dict) and isinstance(ctx.get("error"), BaseException):
        return {"field": field, "detail": str(ctx["error"])}

    msg = error.get("msg")
    detail = msg if isinstance(msg, str) and msg.strip() else ErrorMessages.INVALID_REQUEST
    return {"field": field, "detail": detail}


__all__ = ["validate_or_raise"]

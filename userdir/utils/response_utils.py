"""用户目录 - 响应构造.

成功响应直接输出资源 JSON,错误响应统一走错误封套.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Response, jsonify

from userdir.api.error_mapping import map_exception_to_status
from userdir.constants import HttpStatus
from userdir.utils.logging.error_adapter import ErrorContext, build_error_payload

if TYPE_CHECKING:
    from collections.abc import Mapping

    from userdir.core.types import JsonDict, JsonValue


def jsonify_resource(data: object, *, status: int = HttpStatus.OK) -> Response:
    """把资源(对象或数组)包装成已设置状态码的 JSON Response.

    Flask-RESTX 对 Response 实例原样放行,不再经过其 JSON 表示层.
    """
    response = jsonify(data)
    response.status_code = int(status)
    return response


def unified_error_response(
    error: BaseException,
    *,
    status_code: int | None = None,
    extra: Mapping[str, JsonValue] | None = None,
    context: ErrorContext | None = None,
) -> tuple[JsonDict, int]:
    """生成错误封套与对应的 HTTP 状态码."""
    safe_error = error if isinstance(error, Exception) else Exception(str(error))
    payload = build_error_payload(safe_error, context or ErrorContext(safe_error), extra=extra)
    payload["success"] = False
    return payload, int(status_code or map_exception_to_status(safe_error))


__all__ = ["jsonify_resource", "unified_error_response"]

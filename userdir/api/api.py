"""Flask-RESTX Api 定制.

目标:
- 将 RestX 内部错误统一映射为 `unified_error_response`
"""

from __future__ import annotations

from flask import Response, request
from flask_restx import Api

from userdir.utils.logging.error_adapter import ErrorContext
from userdir.utils.response_utils import jsonify_resource, unified_error_response


class UserDirectoryApi(Api):
    """统一错误封套的 RestX Api."""

    def render_root(self) -> Response:  # type: ignore[override]
        """为 `/api/` 提供可发现性入口."""
        prefix = request.path.rstrip("/")
        docs_url = f"{prefix}{self._doc}" if self._doc else None
        payload = {
            "docs_url": docs_url,
            "openapi_url": f"{prefix}/openapi.json",
            "users_url": f"{prefix}/users",
            "health_ping_url": f"{prefix}/health/ping",
        }
        return jsonify_resource(payload)

    def handle_error(self, e: Exception) -> Response:  # type: ignore[override]
        payload, status_code = unified_error_response(e, context=ErrorContext(e, request))
        return jsonify_resource(payload, status=status_code)

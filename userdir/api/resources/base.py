"""Base Resource helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

from flask import Response
from flask_restx import Resource

from userdir.infra.route_safety import safe_route_call
from userdir.utils.response_utils import jsonify_resource

if TYPE_CHECKING:
    from userdir.core.types import ContextDict, LoggerExtra, RouteSafetyOptions

R = TypeVar("R")


class BaseResource(Resource):
    """资源 JSON 输出与 safe_route_call 适配."""

    def success(self, data: object, *, status: int = 200) -> Response:
        return jsonify_resource(data, status=status)

    def safe_call(
        self,
        func: Callable[[], R],
        *,
        module: str,
        action: str,
        public_error: str,
        context: ContextDict | None = None,
        extra: LoggerExtra | None = None,
        **options: RouteSafetyOptions,
    ) -> R:
        return safe_route_call(
            func,
            module=module,
            action=action,
            public_error=public_error,
            context=context,
            extra=extra,
            **cast("dict[str, Any]", options),
        )

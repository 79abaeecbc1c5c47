"""每个请求的 X-Request-ID 与完成事件.

客户端传入的 X-Request-ID 合法时沿用,否则生成 `req_<hex>`;该值写入 contextvar
供日志与错误封套使用,并回写到响应头.请求结束时记录一条 `http_request_completed`.
"""

from __future__ import annotations

import re
import time
from typing import TYPE_CHECKING
from uuid import uuid4

from flask import Flask, g, request

from userdir.constants import HttpHeaders
from userdir.utils.logging.context_vars import request_id_var
from userdir.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from werkzeug.wrappers.response import Response

REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:-]{0,127}$")


def resolve_request_id(header_value: str | None) -> str:
    candidate = (header_value or "").strip()
    if REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return f"req_{uuid4().hex}"


def register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_request() -> None:
        request_id = resolve_request_id(request.headers.get(HttpHeaders.X_REQUEST_ID))
        g.request_id = request_id
        g.request_id_token = request_id_var.set(request_id)
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        request_id = getattr(g, "request_id", None) or resolve_request_id(None)
        response.headers[HttpHeaders.X_REQUEST_ID] = request_id

        started = getattr(g, "request_started", None)
        duration_ms = round((time.perf_counter() - started) * 1000) if started is not None else None
        get_logger("http").info(
            "http_request_completed",
            module="http",
            action=f"{request.method} {request.path}",
            status_code=response.status_code,
            outcome="success" if response.status_code < 400 else "error",
            duration_ms=duration_ms,
            route=request.url_rule.rule if request.url_rule else None,
            endpoint=request.endpoint,
        )
        return response

    @app.teardown_request
    def _clear_request_id(_exc: BaseException | None) -> None:
        token = g.pop("request_id_token", None)
        if token is not None:
            request_id_var.reset(token)


__all__ = ["register_request_logging", "resolve_request_id"]

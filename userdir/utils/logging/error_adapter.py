"""错误封套构造.

把任意异常归类为 (状态码, 分类, 严重度, 文案) 并拼成对外的错误 JSON,
同时按严重度写一条结构化日志.未知异常只暴露通用文案.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from flask import has_request_context, request
from werkzeug.exceptions import HTTPException

from userdir.api.error_mapping import map_exception_to_status
from userdir.constants import HttpStatus
from userdir.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity
from userdir.core.exceptions import AppError
from userdir.utils.logging.context_vars import request_id_var
from userdir.utils.structlog_config import log_error, log_warning
from userdir.utils.time_utils import time_utils

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from userdir.core.types import JsonDict, JsonValue

_SUGGESTIONS: dict[ErrorCategory, list[str]] = {
    ErrorCategory.VALIDATION: ["Check the submitted fields", "Correct the request and retry"],
    ErrorCategory.BUSINESS: ["Verify the target user", "Refresh the user list and retry"],
    ErrorCategory.DATABASE: ["Retry later", "Contact the administrator"],
}
_DEFAULT_SUGGESTIONS = ["Contact the administrator", "Check the server logs"]


@dataclass(slots=True)
class ErrorContext:
    """一次失败请求的定位信息."""

    error: Exception
    request: Any | None = None
    error_id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=time_utils.now)
    request_id: str | None = field(default_factory=request_id_var.get)

    def public_fields(self) -> JsonDict:
        source = self.request
        if source is None and has_request_context():
            source = request
        fields: JsonDict = {"request_id": self.request_id}
        if source is not None:
            fields["url"] = source.path
            fields["method"] = source.method
        return fields


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    message_key: str
    message: str
    recoverable: bool


def classify_error(error: Exception) -> ErrorClassification:
    """归类异常: AppError 自带语义,HTTPException 按状态码,其余视为系统错误."""
    if isinstance(error, AppError):
        return ErrorClassification(
            status_code=map_exception_to_status(error),
            category=error.category,
            severity=error.severity,
            message_key=error.message_key,
            message=error.message,
            recoverable=error.recoverable,
        )

    if isinstance(error, HTTPException) and (error.code or 0) < HttpStatus.INTERNAL_SERVER_ERROR:
        return ErrorClassification(
            status_code=int(error.code or HttpStatus.BAD_REQUEST),
            category=ErrorCategory.BUSINESS,
            severity=ErrorSeverity.MEDIUM,
            message_key="INVALID_REQUEST",
            message=error.description or ErrorMessages.INVALID_REQUEST,
            recoverable=True,
        )

    return ErrorClassification(
        status_code=map_exception_to_status(error),
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        message_key="INTERNAL_ERROR",
        message=ErrorMessages.INTERNAL_ERROR,
        recoverable=False,
    )


def build_error_payload(
    error: Exception,
    context: ErrorContext,
    *,
    extra: Mapping[str, JsonValue] | None = None,
) -> JsonDict:
    """拼装错误封套并记录日志.

    AppError.extra 与调用方传入的 extra 合并后写入 `extra` 字段(为空时省略).
    """
    classification = classify_error(error)
    merged_extra: JsonDict = dict(error.extra) if isinstance(error, AppError) else {}
    merged_extra.update(extra or {})

    payload: JsonDict = {
        "error": True,
        "error_id": context.error_id,
        "category": classification.category.value,
        "severity": classification.severity.value,
        "message_code": classification.message_key,
        "message": classification.message,
        "timestamp": time_utils.to_iso(context.timestamp),
        "recoverable": classification.recoverable,
        "suggestions": _SUGGESTIONS.get(classification.category, _DEFAULT_SUGGESTIONS),
        "context": context.public_fields(),
    }
    if merged_extra:
        payload["extra"] = merged_extra

    log = log_error if classification.severity is ErrorSeverity.HIGH else log_warning
    log(
        classification.message,
        module="error_handler",
        exception=error,
        error_id=context.error_id,
        status_code=classification.status_code,
        message_code=classification.message_key,
    )
    return payload


__all__ = ["ErrorClassification", "ErrorContext", "build_error_payload", "classify_error"]

"""用户目录常量: HTTP 状态与头、错误语义、用户字段约束."""

from http import HTTPStatus as HttpStatus

from .http_headers import HttpHeaders
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    SuccessMessages,
)
from .user_fields import (
    DEFAULT_PAGE_SIZE,
    EMAIL_PATTERN,
    MAX_PAGE_SIZE,
    PHONE_PATTERN,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "EMAIL_PATTERN",
    "MAX_PAGE_SIZE",
    "PHONE_PATTERN",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "HttpHeaders",
    "HttpStatus",
    "LogLevel",
    "SuccessMessages",
]

"""用户目录业务异常.

异常只携带语义(文案、message_key、分类、严重度、附加字段),
到 HTTP 状态码的映射在 `userdir/api/error_mapping.py` 完成.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from userdir.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from userdir.core.types.structures import LoggerExtra


class AppError(Exception):
    """业务异常基类.

    子类通过类属性声明分类、严重度与默认 message_key;未显式给出 message 时,
    按 message_key 从 `ErrorMessages` 取文案.

    Attributes:
        message: 对外文案.
        message_key: 错误码,写入错误封套的 `message_code`.
        extra: 对外可见的结构化字段,写入错误封套的 `extra`.

    """

    category: ClassVar[ErrorCategory] = ErrorCategory.SYSTEM
    severity: ClassVar[ErrorSeverity] = ErrorSeverity.HIGH
    default_message_key: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
    ) -> None:
        self.message_key = message_key or self.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        return self.severity is not ErrorSeverity.HIGH


class ValidationError(AppError):
    """请求体或查询参数未通过校验."""

    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.LOW
    default_message_key = "VALIDATION_ERROR"


class NotFoundError(AppError):
    """目标用户不存在."""

    category = ErrorCategory.BUSINESS
    severity = ErrorSeverity.LOW
    default_message_key = "RESOURCE_NOT_FOUND"


class ConflictError(AppError):
    """违反唯一约束,例如邮箱已被占用."""

    category = ErrorCategory.BUSINESS
    severity = ErrorSeverity.MEDIUM
    default_message_key = "CONSTRAINT_VIOLATION"


class DatabaseError(AppError):
    category = ErrorCategory.DATABASE
    default_message_key = "DATABASE_QUERY_ERROR"


class SystemError(AppError):
    """未预期的故障;对外只给出路由层的兜底文案."""


__all__ = [
    "AppError",
    "ConflictError",
    "DatabaseError",
    "NotFoundError",
    "SystemError",
    "ValidationError",
]

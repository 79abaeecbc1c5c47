"""用户目录 - 错误语义与对外文案.

文案保持英文,与 REST 客户端展示的提示一致.
"""

from enum import Enum


class LogLevel(Enum):
    """`LOG_LEVEL` 允许的取值."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ErrorCategory(Enum):
    """错误封套中的 `category`."""

    VALIDATION = "validation"
    BUSINESS = "business"
    DATABASE = "database"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误封套中的 `severity`;HIGH 记 error 日志且不可恢复."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorMessages:
    """错误文案,属性名即异常的 message_key."""

    INTERNAL_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation failed"
    RESOURCE_NOT_FOUND = "Resource not found"
    INVALID_REQUEST = "Invalid request"
    DATABASE_QUERY_ERROR = "Database query failed"
    CONSTRAINT_VIOLATION = "Constraint violation"

    USER_NOT_FOUND = "User not found"
    USER_TO_UPDATE_NOT_FOUND = "User to update not found"
    USER_TO_DELETE_NOT_FOUND = "User to delete not found"
    EMAIL_ALREADY_IN_USE = "Email already in use"

    # safe_route_call 的 public_error
    FETCH_USERS_FAILED = "Error fetching users"
    FETCH_USER_FAILED = "Error fetching user"
    CREATE_USER_FAILED = "Error creating user"
    UPDATE_USER_FAILED = "Error updating user"
    DELETE_USER_FAILED = "Error deleting user"


class SuccessMessages:
    USER_DELETED = "User deleted successfully"


__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "SuccessMessages",
]

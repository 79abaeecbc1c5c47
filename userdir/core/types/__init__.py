"""核心类型定义."""

from userdir.core.types.listing import PaginatedResult
from userdir.core.types.structures import (
    ContextDict,
    JsonDict,
    JsonValue,
    LoggerExtra,
    PayloadValue,
    RouteSafetyOptions,
    ScalarValue,
    StructlogEventDict,
)

__all__ = [
    "ContextDict",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "PaginatedResult",
    "PayloadValue",
    "RouteSafetyOptions",
    "ScalarValue",
    "StructlogEventDict",
]

"""JSON 与日志字段的类型别名,以及 safe_route_call 的可选参数."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias, TypedDict

ScalarValue: TypeAlias = str | int | float | bool | None
PayloadValue: TypeAlias = ScalarValue | Sequence[ScalarValue] | Mapping[str, ScalarValue]

JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
JsonDict: TypeAlias = dict[str, JsonValue]
ContextDict: TypeAlias = dict[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]


class RouteSafetyOptions(TypedDict, total=False):
    context: ContextDict | None
    extra: LoggerExtra | None
    expected_exceptions: tuple[type[BaseException], ...]


__all__ = [
    "ContextDict",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "PayloadValue",
    "RouteSafetyOptions",
    "ScalarValue",
    "StructlogEventDict",
]

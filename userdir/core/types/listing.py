"""服务端分页结果."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class PaginatedResult(Generic[T]):
    """`/users/page` 的一页结果: 当前页条目、筛选后总数、页码、总页数与每页条数."""

    items: list[T]
    total: int
    page: int
    pages: int
    limit: int

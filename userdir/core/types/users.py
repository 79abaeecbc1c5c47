"""用户相关类型定义."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from userdir.constants.user_fields import DEFAULT_PAGE_SIZE


class StatusFilter(str, Enum):
    """列表状态筛选."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class SortKey(str, Enum):
    """列表排序列."""

    ID = "id"
    NAME = "name"


class SortDirection(str, Enum):
    """排序方向."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESCENDING if self is SortDirection.ASCENDING else SortDirection.ASCENDING


def _parse_timestamp(value: object) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class UserRecord:
    """用户记录(只读快照).

    列表视图模型只读取该结构,不会修改.字段与 REST 载荷一一对应,
    时间戳在传输层使用 camelCase 键 `createdAt`/`updatedAt`.
    """

    id: int
    name: str
    email: str
    phone: str
    department: str
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserRecord:
        """从 REST JSON 载荷构造记录."""
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            phone=str(data["phone"]),
            department=str(data["department"]),
            active=bool(data.get("active", True)),
            created_at=_parse_timestamp(data.get("createdAt")),
            updated_at=_parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为 REST JSON 载荷."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "active": self.active,
            "createdAt": _format_timestamp(self.created_at),
            "updatedAt": _format_timestamp(self.updated_at),
        }


@dataclass(slots=True)
class UserListViewState:
    """列表页视图状态.

    仅由视图模型的显式 setter 修改,不持久化;新建视图模型即恢复默认值.
    """

    search_text: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_key: SortKey = SortKey.ID
    sort_direction: SortDirection = SortDirection.ASCENDING
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def snapshot(self) -> tuple[str, StatusFilter, SortKey, SortDirection, int, int]:
        return (
            self.search_text,
            self.status_filter,
            self.sort_key,
            self.sort_direction,
            self.page_number,
            self.page_size,
        )


@dataclass(frozen=True, slots=True)
class UserPage:
    """视图推导结果: 当前页切片与分页元信息."""

    items: tuple[UserRecord, ...]
    total_pages: int
    total_filtered: int


@dataclass(slots=True)
class UserListQuery:
    """服务端分页视图的查询条件."""

    page: int
    limit: int
    search: str
    status: StatusFilter
    sort_key: SortKey
    sort_direction: SortDirection

    def to_view_state(self) -> UserListViewState:
        return UserListViewState(
            search_text=self.search,
            status_filter=self.status,
            sort_key=self.sort_key,
            sort_direction=self.sort_direction,
            page_number=self.page,
            page_size=self.limit,
        )

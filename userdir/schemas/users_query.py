"""用户列表 query schema.

将 `/users/page` 的 query 参数规范化/默认值/边界处理下沉到 schema 单入口.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from userdir.constants.user_fields import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from userdir.core.types.users import SortDirection, SortKey, StatusFilter, UserListQuery
from userdir.schemas.base import QuerySchema

_DEFAULT_PAGE = 1


def _parse_int(value: Any, *, default: int) -> int:
    if value is None:
        return default
    # bool 是 int 的子类,分页参数不应接受 bool.
    if isinstance(value, bool):
        raise ValueError("Value must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return default
        try:
            return int(stripped, 10)
        except ValueError as exc:
            raise ValueError("Value must be an integer") from exc
    raise ValueError("Value must be an integer")


def _parse_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


class UserListPageQuery(QuerySchema):
    """用户分页列表 query 参数 schema.

    - page < 1 视为 1; limit 钳制到 [1, MAX_PAGE_SIZE]
    - 非法 status 直接报错; 非法 sort/order 降级为默认值
    """

    page: int = _DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    sort_key: SortKey = Field(default=SortKey.ID, validation_alias=AliasChoices("sort", "sort_key"))
    sort_direction: SortDirection = Field(
        default=SortDirection.ASCENDING,
        validation_alias=AliasChoices("order", "sort_direction"),
    )

    @field_validator("page", mode="before")
    @classmethod
    def _parse_page(cls, value: Any) -> int:
        return max(_parse_int(value, default=_DEFAULT_PAGE), 1)

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int:
        parsed = _parse_int(value, default=DEFAULT_PAGE_SIZE)
        return max(min(parsed, MAX_PAGE_SIZE), 1)

    @field_validator("search", mode="before")
    @classmethod
    def _parse_search(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> StatusFilter:
        cleaned = _parse_text(value).lower()
        if not cleaned:
            return StatusFilter.ALL
        try:
            return StatusFilter(cleaned)
        except ValueError as exc:
            raise ValueError("Status must be one of all, active, inactive") from exc

    @field_validator("sort_key", mode="before")
    @classmethod
    def _parse_sort_key(cls, value: Any) -> SortKey:
        cleaned = _parse_text(value).lower()
        try:
            return SortKey(cleaned)
        except ValueError:
            return SortKey.ID

    @field_validator("sort_direction", mode="before")
    @classmethod
    def _parse_sort_direction(cls, value: Any) -> SortDirection:
        cleaned = _parse_text(value).lower()
        try:
            return SortDirection(cleaned)
        except ValueError:
            return SortDirection.ASCENDING

    def to_query(self) -> UserListQuery:
        return UserListQuery(
            page=self.page,
            limit=self.limit,
            search=self.search,
            status=self.status,
            sort_key=self.sort_key,
            sort_direction=self.sort_direction,
        )

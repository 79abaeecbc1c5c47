"""用户列表视图模型.

职责:
- 基于完整记录集与当前视图状态推导: 搜索 -> 状态筛选 -> 排序 -> 分页
- 提供由界面事件驱动的状态 setter
- 纯计算: 不做 I/O、不持有记录集、不依赖 Flask

约定:
- 修改搜索词/状态筛选不会重置页码;页码不做内部钳制,越界页返回空切片.
- 排序为稳定排序;降序翻转比较方向而非反转已排好的列表,相等键保持输入顺序.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from userdir.constants.user_fields import DEFAULT_PAGE_SIZE
from userdir.core.types.users import (
    SortDirection,
    SortKey,
    StatusFilter,
    UserListViewState,
    UserPage,
    UserRecord,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def _matches_search(record: UserRecord, needle: str) -> bool:
    return needle in record.name.lower()


def _matches_status(record: UserRecord, status_filter: StatusFilter) -> bool:
    if status_filter is StatusFilter.ACTIVE:
        return record.active
    if status_filter is StatusFilter.INACTIVE:
        return not record.active
    return True


def _sort_key_func(sort_key: SortKey) -> Callable[[UserRecord], object]:
    if sort_key is SortKey.NAME:
        return lambda record: record.name.lower()
    return lambda record: record.id


def filter_and_sort(records: Sequence[UserRecord], state: UserListViewState) -> list[UserRecord]:
    """执行搜索、状态筛选与排序,返回完整的有序结果."""
    needle = state.search_text.lower()
    filtered = [
        record
        for record in records
        if _matches_search(record, needle) and _matches_status(record, state.status_filter)
    ]
    # sorted(reverse=True) 仍保持相等键的原始顺序
    return sorted(
        filtered,
        key=_sort_key_func(state.sort_key),
        reverse=state.sort_direction is SortDirection.DESCENDING,
    )


def count_pages(total: int, page_size: int) -> int:
    """计算总页数,空结果返回 0."""
    if total <= 0:
        return 0
    return -(-total // page_size)


def derive_user_page(records: Sequence[UserRecord], state: UserListViewState) -> UserPage:
    """根据视图状态从完整记录集推导当前页.

    Args:
        records: 完整记录集(只读).
        state: 当前视图状态.

    Returns:
        UserPage: 当前页切片、总页数与筛选后总数.

    """
    ordered = filter_and_sort(records, state)
    total = len(ordered)
    start = max((state.page_number - 1) * state.page_size, 0)
    end = max(state.page_number * state.page_size, 0)
    return UserPage(
        items=tuple(ordered[start:end]),
        total_pages=count_pages(total, state.page_size),
        total_filtered=total,
    )


def describe_page_range(page_number: int, page_size: int, total: int) -> str:
    """生成分页摘要文案,如 "Showing 1 to 10 of 25 users"."""
    last_index = page_number * page_size
    first_index = last_index - page_size
    return f"Showing {min(first_index + 1, total)} to {min(last_index, total)} of {total} users"


def display_total_pages(total_pages: int) -> int:
    """展示用总页数: 0 页按 "page 1 of 1" 处理."""
    return max(total_pages, 1)


class UserListViewModel:
    """列表页视图模型.

    持有 `UserListViewState`,记录集由调用方在 `derive` 时显式传入.

    Example:
        >>> view = UserListViewModel(page_size=10)
        >>> view.set_search_text("ali")
        >>> page = view.derive(store.records)

    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            msg = f"page_size 必须为正整数: {page_size!r}"
            raise ValueError(msg)
        self._state = UserListViewState(page_size=page_size)
        self._memo_key: tuple[object, ...] | None = None
        self._memo_page: UserPage | None = None

    @property
    def state(self) -> UserListViewState:
        return self._state

    def set_search_text(self, text: str) -> None:
        """替换搜索词,不重置页码."""
        self._state.search_text = text

    def set_status_filter(self, status_filter: StatusFilter | str) -> None:
        """替换状态筛选.

        Raises:
            ValueError: 取值不在 all/active/inactive 中.

        """
        self._state.status_filter = StatusFilter(status_filter)

    def toggle_sort(self, column: SortKey | str) -> None:
        """点击同一列翻转方向;切换到新列时重置为升序."""
        sort_key = SortKey(column)
        if sort_key is self._state.sort_key:
            self._state.sort_direction = self._state.sort_direction.flipped()
            return
        self._state.sort_key = sort_key
        self._state.sort_direction = SortDirection.ASCENDING

    def set_page(self, page_number: int) -> None:
        """替换页码,不做钳制."""
        self._state.page_number = page_number

    def derive(self, records: Sequence[UserRecord]) -> UserPage:
        """推导当前页;记录集与状态均未变化时复用上次结果."""
        key = (tuple(records), self._state.snapshot())
        if self._memo_page is not None and key == self._memo_key:
            return self._memo_page
        page = derive_user_page(key[0], self._state)
        self._memo_key = key
        self._memo_page = page
        return page

    def describe(self, page: UserPage) -> str:
        """当前页的分页摘要文案."""
        return describe_page_range(self._state.page_number, self._state.page_size, page.total_filtered)


__all__ = [
    "UserListViewModel",
    "count_pages",
    "derive_user_page",
    "describe_page_range",
    "display_total_pages",
    "filter_and_sort",
]

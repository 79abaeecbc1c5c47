"""用户列表 Service.

职责:
- 组织 repository 调用并将 ORM 对象转换为只读记录
- 服务端分页复用与客户端相同的列表推导(derive_user_page)
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from userdir.core.types.listing import PaginatedResult
from userdir.core.types.users import UserListQuery, UserRecord
from userdir.core.user_list_view import derive_user_page
from userdir.repositories.users_repository import UsersRepository
from userdir.utils.structlog_config import log_debug


class UsersListService:
    """用户列表业务编排服务."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        """初始化服务并注入用户仓库."""
        self._repository = repository or UsersRepository()

    def list_all(self) -> list[UserRecord]:
        """返回按 id 升序的完整记录集."""
        return [user.to_record() for user in self._repository.list_all()]

    def list_page(self, query: UserListQuery) -> PaginatedResult[UserRecord]:
        """按搜索/筛选/排序/分页条件返回一页记录."""
        page = derive_user_page(self.list_all(), query.to_view_state())
        log_debug(
            "用户分页查询",
            module="users",
            page=query.page,
            limit=query.limit,
            status=query.status.value,
            total=page.total_filtered,
        )
        return PaginatedResult(
            items=list(page.items),
            total=page.total_filtered,
            page=query.page,
            pages=page.total_pages,
            limit=query.limit,
        )

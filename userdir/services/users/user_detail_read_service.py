"""用户详情 Service.

职责:
- 组织 repository 调用
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from userdir.constants.system_constants import ErrorMessages
from userdir.core.exceptions import NotFoundError
from userdir.models.user import User
from userdir.repositories.users_repository import UsersRepository


class UserDetailReadService:
    """用户详情读取服务."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        """初始化服务并注入用户仓库."""
        self._repository = repository or UsersRepository()

    def get_user_or_error(self, user_id: int) -> User:
        """按 ID 获取用户(不存在则抛错)."""
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND, extra={"user_id": user_id})
        return user

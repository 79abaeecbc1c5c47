"""用户写操作 Service.

职责:
- 处理用户的创建/更新/删除编排
- 负责 payload 校验与邮箱唯一性检查
- 调用 repository 执行 add/delete/flush
- 不返回 Response、不 commit
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from userdir.constants.system_constants import ErrorMessages
from userdir.core.exceptions import ConflictError, DatabaseError, NotFoundError
from userdir.models.user import User
from userdir.repositories.users_repository import UsersRepository
from userdir.schemas.users import UserPayload
from userdir.schemas.validation import validate_or_raise
from userdir.utils.structlog_config import log_error, log_info

if TYPE_CHECKING:
    from userdir.core.types.users import UserRecord


@dataclass(slots=True)
class UserDeleteOutcome:
    """用户删除结果: 保留被删除记录的快照用于响应."""

    record: UserRecord


class UserWriteService:
    """用户写操作服务."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        """初始化服务并注入用户仓库."""
        self._repository = repository or UsersRepository()

    def create(self, payload: object) -> User:
        """创建用户.

        Raises:
            ValidationError: payload 校验失败.
            ConflictError: 邮箱已被占用.

        """
        params = validate_or_raise(UserPayload, payload)
        self._ensure_email_unique(params.email, resource=None)

        user = User()
        self._assign(user, params)
        self._flush(user)

        log_info(
            "创建用户成功",
            module="users",
            target_user_id=user.id,
            email=user.email,
            active=bool(user.active),
        )
        return user

    def update(self, user_id: int, payload: object) -> User:
        """整体替换用户字段(先校验 payload,再查找记录)."""
        params = validate_or_raise(UserPayload, payload)
        user = self._get_or_error(user_id, message=ErrorMessages.USER_TO_UPDATE_NOT_FOUND)
        self._ensure_email_unique(params.email, resource=user)

        self._assign(user, params)
        self._flush(user)

        log_info(
            "更新用户成功",
            module="users",
            target_user_id=user.id,
            email=user.email,
            active=bool(user.active),
        )
        return user

    def delete(self, user_id: int) -> UserDeleteOutcome:
        """删除用户并返回删除前的记录快照."""
        user = self._get_or_error(user_id, message=ErrorMessages.USER_TO_DELETE_NOT_FOUND)
        outcome = UserDeleteOutcome(record=user.to_record())
        self._repository.delete(user)

        log_info(
            "删除用户",
            module="users",
            deleted_user_id=outcome.record.id,
            deleted_email=outcome.record.email,
        )
        return outcome

    def _ensure_email_unique(self, email: str, *, resource: User | None) -> None:
        existing = self._repository.get_by_email(email)
        if existing and (resource is None or existing.id != resource.id):
            raise ConflictError(ErrorMessages.EMAIL_ALREADY_IN_USE, message_key="EMAIL_ALREADY_IN_USE")

    def _flush(self, user: User) -> None:
        try:
            self._repository.add(user)
        except IntegrityError as exc:
            # 并发写入时唯一索引兜底
            if "email" in str(exc.orig).lower():
                raise ConflictError(ErrorMessages.EMAIL_ALREADY_IN_USE, message_key="EMAIL_ALREADY_IN_USE") from exc
            log_error("写入用户失败", module="users", exception=exc, email=user.email)
            raise DatabaseError(extra={"operation": "flush_user"}) from exc

    def _get_or_error(self, user_id: int, *, message: str) -> User:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(message, extra={"user_id": user_id})
        return user

    @staticmethod
    def _assign(user: User, params: UserPayload) -> None:
        user.name = params.name
        user.email = params.email
        user.phone = params.phone
        user.department = params.department
        user.active = params.active

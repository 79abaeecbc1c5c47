"""客户端记录容器.

持有从服务端拉取的完整记录集,写操作成功后在本地同步(追加/原位替换/移除),
不触碰列表视图状态.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from userdir.client.api_client import ApiClientError, UsersApiClient
from userdir.constants.system_constants import ErrorMessages
from userdir.core.types.users import UserRecord
from userdir.utils.structlog_config import log_info, log_warning

FETCH_FAILED_MESSAGE = "Failed to fetch users. Please try again later."
ADD_FAILED_MESSAGE = "Failed to add user. Please check your input."
UPDATE_FAILED_MESSAGE = "Failed to update user. Please check your input."
DELETE_FAILED_MESSAGE = "Failed to delete user."
EMAIL_IN_USE_MESSAGE = "Email already in use, please use another email."


def _write_error_message(error: ApiClientError, default: str) -> str:
    server_message = error.server_message
    if server_message == ErrorMessages.EMAIL_ALREADY_IN_USE:
        return EMAIL_IN_USE_MESSAGE
    return server_message or default


class UserStore:
    """记录容器.

    Attributes:
        records: 当前完整记录集(按服务端返回顺序).
        loading: 是否正在拉取.
        error: 最近一次失败的可展示文案,成功操作会清空.

    """

    def __init__(self, client: UsersApiClient) -> None:
        self._client = client
        self.records: list[UserRecord] = []
        self.loading = False
        self.error: str | None = None

    def fetch_users(self) -> list[UserRecord]:
        self.loading = True
        self.error = None
        try:
            self.records = self._client.get_users()
        except ApiClientError as exc:
            self.error = FETCH_FAILED_MESSAGE
            log_warning("拉取用户列表失败", module="client", exception=exc, status_code=exc.status_code)
            raise
        finally:
            self.loading = False
        log_info("拉取用户列表成功", module="client", total=len(self.records))
        return self.records

    def add_user(self, data: Mapping[str, Any]) -> UserRecord:
        self.error = None
        try:
            record = self._client.add_user(data)
        except ApiClientError as exc:
            self.error = _write_error_message(exc, ADD_FAILED_MESSAGE)
            log_warning("创建用户失败", module="client", exception=exc, status_code=exc.status_code)
            raise
        self.records = [*self.records, record]
        return record

    def update_user(self, user_id: int, data: Mapping[str, Any]) -> UserRecord:
        self.error = None
        try:
            record = self._client.update_user(user_id, data)
        except ApiClientError as exc:
            self.error = _write_error_message(exc, UPDATE_FAILED_MESSAGE)
            log_warning("更新用户失败", module="client", exception=exc, status_code=exc.status_code)
            raise
        self.records = [record if item.id == record.id else item for item in self.records]
        return record

    def delete_user(self, user_id: int) -> None:
        try:
            self._client.delete_user(user_id)
        except ApiClientError as exc:
            self.error = DELETE_FAILED_MESSAGE
            log_warning("删除用户失败", module="client", exception=exc, status_code=exc.status_code)
            raise
        self.records = [item for item in self.records if item.id != user_id]

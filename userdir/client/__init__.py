"""用户目录 REST 客户端与本地记录容器."""

from userdir.client.api_client import ApiClientError, UsersApiClient
from userdir.client.user_store import UserStore

__all__ = ["ApiClientError", "UserStore", "UsersApiClient"]

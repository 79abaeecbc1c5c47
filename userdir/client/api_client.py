"""用户目录 REST 客户端.

基于 requests.Session,对 `/users` 五个端点做薄封装: 成功返回解析后的记录,
非 2xx 与连接失败统一抛出 `ApiClientError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from userdir.constants import HttpHeaders
from userdir.core.types.users import UserRecord
from userdir.settings import DEFAULT_CLIENT_BASE_URL, DEFAULT_CLIENT_TIMEOUT_SECONDS


class ApiClientError(RuntimeError):
    """REST 调用失败.

    Attributes:
        status_code: HTTP 状态码,连接失败时为 None.
        message: 服务端错误封套中的 message,缺失时为本地描述.
        payload: 服务端返回的 JSON(若可解析).

    """

    def __init__(self, message: str, *, status_code: int | None = None, payload: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def server_message(self) -> str | None:
        """服务端响应中的 message 字段(无响应时为 None)."""
        if self.status_code is None or not isinstance(self.payload, Mapping):
            return None
        message = self.payload.get("message")
        return message if isinstance(message, str) and message else None


class UsersApiClient:
    """`/users` 资源客户端."""

    def __init__(
        self,
        base_url: str = DEFAULT_CLIENT_BASE_URL,
        timeout: float = DEFAULT_CLIENT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault(HttpHeaders.ACCEPT, HttpHeaders.APPLICATION_JSON)

    def get_users(self) -> list[UserRecord]:
        data = self._request("GET", "/users")
        if not isinstance(data, list):
            raise ApiClientError("Unexpected response for user list", payload=data)
        return [UserRecord.from_dict(item) for item in data]

    def get_user(self, user_id: int) -> UserRecord:
        return UserRecord.from_dict(self._request("GET", f"/users/{user_id}"))

    def add_user(self, data: Mapping[str, Any]) -> UserRecord:
        return UserRecord.from_dict(self._request("POST", "/users", json=dict(data)))

    def update_user(self, user_id: int, data: Mapping[str, Any]) -> UserRecord:
        return UserRecord.from_dict(self._request("PUT", f"/users/{user_id}", json=dict(data)))

    def delete_user(self, user_id: int) -> UserRecord | None:
        """删除用户,返回服务端回显的被删记录(若有)."""
        data = self._request("DELETE", f"/users/{user_id}")
        if isinstance(data, Mapping) and isinstance(data.get("user"), Mapping):
            return UserRecord.from_dict(data["user"])
        return None

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ApiClientError(f"Request to {url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            message = None
            if isinstance(payload, Mapping):
                message = payload.get("message")
            raise ApiClientError(
                str(message or f"HTTP {response.status_code}"),
                status_code=response.status_code,
                payload=payload,
            )
        return payload


__all__ = ["ApiClientError", "UsersApiClient"]

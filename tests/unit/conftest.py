# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供 monkeypatch 相关的通用 fixtures 与记录构造工具。
"""

import pytest

from userdir.core.types.users import UserRecord


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 不依赖外部数据库/服务
    - 避免开发者本机环境变量影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    for name in ("USERDIR_API_URL", "USERDIR_API_TIMEOUT", "DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_record():
    """构造 UserRecord 的工厂."""

    def _make(record_id: int, name: str | None = None, *, active: bool = True) -> UserRecord:
        return UserRecord(
            id=record_id,
            name=name if name is not None else f"User {record_id}",
            email=f"user{record_id}@example.com",
            phone=f"08123456{record_id:04d}",
            department="Technology",
            active=active,
        )

    return _make

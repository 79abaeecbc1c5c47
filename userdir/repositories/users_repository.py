"""用户 Repository.

职责:
- 负责 Query 组装与数据库读取(read)
- 负责写操作的数据落库(add/delete/flush)(write)
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from typing import cast

from userdir import db
from userdir.models.user import User


class UsersRepository:
    """用户查询 Repository."""

    def get_by_id(self, user_id: int) -> User | None:
        return cast("User | None", db.session.get(User, user_id))

    def get_by_email(self, email: str) -> User | None:
        normalized = (email or "").strip().lower()
        if not normalized:
            return None
        return cast("User | None", User.query.filter(User.email == normalized).first())

    def list_all(self) -> list[User]:
        """按 id 升序返回完整记录集."""
        return list(User.query.order_by(User.id.asc()).all())

    def add(self, user: User) -> User:
        db.session.add(user)
        db.session.flush()
        return user

    def delete(self, user: User) -> None:
        db.session.delete(user)
        db.session.flush()

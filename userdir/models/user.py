"""用户目录 - 用户模型."""

from __future__ import annotations

from typing import Any

from userdir import db
from userdir.constants.user_fields import (
    DEPARTMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)
from userdir.core.types.users import UserRecord
from userdir.utils.time_utils import time_utils


class User(db.Model):
    """用户模型.

    Attributes:
        id: 用户 ID,主键,由数据库分配.
        name: 姓名.
        email: 邮箱,唯一索引.
        phone: 电话,10-15 位数字,可带前导 `+`.
        department: 部门.
        active: 是否启用.
        created_at: 创建时间.
        updated_at: 最后修改时间.

    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    email = db.Column(db.String(EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)
    phone = db.Column(db.String(PHONE_MAX_LENGTH), nullable=False)
    department = db.Column(db.String(DEPARTMENT_MAX_LENGTH), nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=time_utils.now)
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=time_utils.now,
        onupdate=time_utils.now,
    )

    def to_dict(self) -> dict[str, Any]:
        """转换为 REST JSON 载荷(时间戳使用 camelCase 键)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "active": bool(self.active),
            "createdAt": time_utils.to_iso(self.created_at),
            "updatedAt": time_utils.to_iso(self.updated_at),
        }

    def to_record(self) -> UserRecord:
        """转换为只读记录快照."""
        return UserRecord(
            id=int(self.id),
            name=self.name,
            email=self.email,
            phone=self.phone,
            department=self.department,
            active=bool(self.active),
            created_at=time_utils.to_utc(self.created_at),
            updated_at=time_utils.to_utc(self.updated_at),
        )

    def __repr__(self) -> str:
        return f"<User {self.email}>"

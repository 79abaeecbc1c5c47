"""演示数据填充 Service."""

from __future__ import annotations

from dataclasses import dataclass

from userdir.models.user import User
from userdir.repositories.users_repository import UsersRepository
from userdir.utils.structlog_config import log_info

DEFAULT_SEED_COUNT = 20


@dataclass(slots=True)
class SeedOutcome:
    """填充结果."""

    created: int
    skipped: int


def build_seed_user(index: int) -> User:
    """构造第 index 个演示用户(偶数在 Technology,每三个一个停用)."""
    return User(
        name=f"User {index}",
        email=f"user{index}@example.com",
        phone=f"0812345678{index:02d}",
        department="Technology" if index % 2 == 0 else "HR",
        active=index % 3 != 0,
    )


class UserSeedService:
    """填充演示用户,已存在的邮箱跳过,不 commit."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        self._repository = repository or UsersRepository()

    def seed(self, count: int = DEFAULT_SEED_COUNT) -> SeedOutcome:
        created = 0
        skipped = 0
        for index in range(1, count + 1):
            user = build_seed_user(index)
            if self._repository.get_by_email(user.email) is not None:
                skipped += 1
                continue
            self._repository.add(user)
            created += 1

        log_info("演示用户填充完成", module="users", created=created, skipped=skipped)
        return SeedOutcome(created=created, skipped=skipped)

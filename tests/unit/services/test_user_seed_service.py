import pytest

from userdir.models.user import User
from userdir.repositories.users_repository import UsersRepository
from userdir.services.users.user_seed_service import UserSeedService, build_seed_user


class _StubUsersRepository(UsersRepository):
    def __init__(self, existing_emails: set[str]) -> None:
        self._existing = set(existing_emails)
        self.added: list[User] = []

    def get_by_email(self, email: str) -> User | None:
        return User(email=email) if email in self._existing else None

    def add(self, user: User) -> User:
        self._existing.add(user.email)
        self.added.append(user)
        return user


@pytest.mark.unit
def test_build_seed_user_pattern() -> None:
    second = build_seed_user(2)
    third = build_seed_user(3)

    assert second.name == "User 2"
    assert second.email == "user2@example.com"
    assert second.phone == "081234567802"
    assert second.department == "Technology"
    assert second.active is True
    assert third.department == "HR"
    assert third.active is False


@pytest.mark.unit
def test_seed_skips_existing_emails() -> None:
    repository = _StubUsersRepository({"user1@example.com", "user5@example.com"})

    outcome = UserSeedService(repository=repository).seed(6)

    assert outcome.created == 4
    assert outcome.skipped == 2
    assert [user.email for user in repository.added] == [
        "user2@example.com",
        "user3@example.com",
        "user4@example.com",
        "user6@example.com",
    ]


@pytest.mark.unit
def test_seed_default_count_is_twenty() -> None:
    repository = _StubUsersRepository(set())

    assert UserSeedService(repository=repository).seed().created == 20

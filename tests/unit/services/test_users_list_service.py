import pytest

from userdir.core.exceptions import NotFoundError
from userdir.core.types.users import SortDirection, SortKey, StatusFilter, UserListQuery
from userdir.models.user import User
from userdir.repositories.users_repository import UsersRepository
from userdir.services.users.user_detail_read_service import UserDetailReadService
from userdir.services.users.users_list_service import UsersListService


def _user(user_id: int, name: str, *, active: bool = True) -> User:
    user = User(
        name=name,
        email=f"u{user_id}@example.com",
        phone="0812345678",
        department="HR",
        active=active,
    )
    user.id = user_id  # type: ignore[attr-defined]
    return user


class _StubUsersRepository(UsersRepository):
    def __init__(self, users: list[User]) -> None:
        self._users = users

    def list_all(self) -> list[User]:
        return list(self._users)

    def get_by_id(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)


@pytest.fixture
def repository():
    return _StubUsersRepository(
        [
            _user(1, "Bob"),
            _user(2, "alice", active=False),
            _user(3, "Carol"),
            _user(4, "Dan"),
        ],
    )


@pytest.mark.unit
def test_list_all_returns_records(repository) -> None:
    records = UsersListService(repository=repository).list_all()

    assert [record.id for record in records] == [1, 2, 3, 4]
    assert records[1].active is False


@pytest.mark.unit
def test_list_page_applies_view_derivation(repository) -> None:
    query = UserListQuery(
        page=1,
        limit=2,
        search="",
        status=StatusFilter.ACTIVE,
        sort_key=SortKey.NAME,
        sort_direction=SortDirection.DESCENDING,
    )

    result = UsersListService(repository=repository).list_page(query)

    assert [record.name for record in result.items] == ["Dan", "Carol"]
    assert result.total == 3
    assert result.pages == 2
    assert result.page == 1
    assert result.limit == 2


@pytest.mark.unit
def test_detail_read_service_raises_not_found(repository) -> None:
    service = UserDetailReadService(repository=repository)

    assert service.get_user_or_error(3).name == "Carol"
    with pytest.raises(NotFoundError) as exc:
        service.get_user_or_error(99)

    assert exc.value.message == "User not found"

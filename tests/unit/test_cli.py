import pytest

from userdir import cli
from userdir.client.api_client import ApiClientError
from userdir.core.types.users import SortDirection, SortKey, StatusFilter


def _stub_client_factory(records=None, *, error: ApiClientError | None = None):
    class _StubUsersApiClient:
        instances: list["_StubUsersApiClient"] = []

        def __init__(self, base_url: str, timeout: float, session=None) -> None:
            self.base_url = base_url
            self.timeout = timeout
            type(self).instances.append(self)

        def get_users(self):
            if error is not None:
                raise error
            return list(records or [])

    return _StubUsersApiClient


@pytest.mark.unit
def test_build_view_applies_sort_and_direction() -> None:
    args = cli.parse_args(["--sort", "name", "--desc", "--status", "active", "--search", "al", "--page", "2"])

    view = cli.build_view(args, default_page_size=10)

    assert view.state.sort_key is SortKey.NAME
    assert view.state.sort_direction is SortDirection.DESCENDING
    assert view.state.status_filter is StatusFilter.ACTIVE
    assert view.state.search_text == "al"
    assert view.state.page_number == 2
    assert view.state.page_size == 10


@pytest.mark.unit
def test_build_view_descending_on_default_column() -> None:
    view = cli.build_view(cli.parse_args(["--desc", "--page-size", "5"]), default_page_size=10)

    assert view.state.sort_key is SortKey.ID
    assert view.state.sort_direction is SortDirection.DESCENDING
    assert view.state.page_size == 5


@pytest.mark.unit
def test_render_page_lists_rows_and_footer(make_record) -> None:
    view = cli.build_view(cli.parse_args(["--page-size", "2"]), default_page_size=10)
    page = view.derive([make_record(1, "Alice"), make_record(2, "Bob", active=False), make_record(3)])

    lines = cli.render_page(view, page)

    assert lines[0].startswith("ID")
    assert "Alice" in lines[2]
    assert "inactive" in lines[3]
    assert lines[-2] == "Showing 1 to 2 of 3 users"
    assert lines[-1] == "Page 1 of 2"


@pytest.mark.unit
def test_render_empty_page_shows_placeholder() -> None:
    view = cli.build_view(cli.parse_args([]), default_page_size=10)
    page = view.derive([])

    lines = cli.render_page(view, page)

    assert "No users found." in lines
    assert lines[-2] == "Showing 0 to 0 of 0 users"
    assert lines[-1] == "Page 1 of 1"


@pytest.mark.unit
def test_main_prints_page(monkeypatch, capsys, make_record) -> None:
    stub = _stub_client_factory([make_record(1, "Alice"), make_record(2, "Bob")])
    monkeypatch.setattr(cli, "UsersApiClient", stub)

    exit_code = cli.main(["--base-url", "http://api.test/api", "--search", "bo"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Bob" in out
    assert "Alice" not in out
    assert "Showing 1 to 1 of 1 users" in out
    assert stub.instances[0].base_url == "http://api.test/api"


@pytest.mark.unit
def test_main_reports_fetch_failure(monkeypatch, capsys) -> None:
    stub = _stub_client_factory(error=ApiClientError("connection refused"))
    monkeypatch.setattr(cli, "UsersApiClient", stub)

    exit_code = cli.main([])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Failed to fetch users" in err
    assert "connection refused" in err


@pytest.mark.unit
def test_main_rejects_non_positive_page_size(capsys) -> None:
    assert cli.main(["--page-size", "0"]) == 2
    assert "--page-size" in capsys.readouterr().err

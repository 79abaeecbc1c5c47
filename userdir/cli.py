"""`userdir-list` 命令行入口.

通过 UserStore 拉取完整记录集,再由 UserListViewModel 推导当前页并打印表格.

示例用法:

    userdir-list --search ali --status active --sort name --desc --page 2
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from userdir.client import ApiClientError, UsersApiClient, UserStore
from userdir.core.types.users import SortKey, StatusFilter, UserPage
from userdir.core.user_list_view import UserListViewModel, display_total_pages
from userdir.settings import Settings

_COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 6),
    ("Name", 24),
    ("Email", 32),
    ("Phone", 16),
    ("Department", 16),
    ("Status", 8),
)


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """解析命令行参数."""
    parser = argparse.ArgumentParser(prog="userdir-list", description="列出用户目录中的记录")
    parser.add_argument("--base-url", help="API 基础地址,默认读取 USERDIR_API_URL")
    parser.add_argument("--timeout", type=float, help="请求超时时间(秒)")
    parser.add_argument("--search", default="", help="按姓名模糊搜索(不区分大小写)")
    parser.add_argument("--status", default="all", choices=[item.value for item in StatusFilter])
    parser.add_argument("--sort", default="id", choices=[item.value for item in SortKey])
    parser.add_argument("--desc", action="store_true", help="降序排列")
    parser.add_argument("--page", type=int, default=1, help="页码(从 1 开始)")
    parser.add_argument("--page-size", type=int, default=None, help="每页条数")
    return parser.parse_args(argv)


def build_view(args: argparse.Namespace, *, default_page_size: int) -> UserListViewModel:
    """按命令行参数驱动视图模型的 setter."""
    view = UserListViewModel(page_size=args.page_size or default_page_size)
    view.set_search_text(args.search)
    view.set_status_filter(args.status)
    if args.sort != view.state.sort_key.value:
        view.toggle_sort(args.sort)
    if args.desc:
        view.toggle_sort(args.sort)
    view.set_page(args.page)
    return view


def render_page(view: UserListViewModel, page: UserPage) -> list[str]:
    """渲染当前页为文本行."""
    header = "  ".join(title.ljust(width) for title, width in _COLUMNS)
    lines = [header, "-" * len(header)]
    for record in page.items:
        cells = (
            str(record.id),
            record.name,
            record.email,
            record.phone,
            record.department,
            "active" if record.active else "inactive",
        )
        lines.append("  ".join(cell[:width].ljust(width) for cell, (_, width) in zip(cells, _COLUMNS, strict=True)))
    if not page.items:
        lines.append("No users found.")
    lines.append(view.describe(page))
    lines.append(f"Page {view.state.page_number} of {display_total_pages(page.total_pages)}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """命令行入口,成功返回 0,客户端错误返回 1."""
    args = parse_args(argv)
    settings = Settings.load()
    if args.page_size is not None and args.page_size <= 0:
        print("error: --page-size must be a positive integer", file=sys.stderr)
        return 2

    client = UsersApiClient(
        base_url=args.base_url or settings.client_base_url,
        timeout=args.timeout or settings.client_timeout_seconds,
    )
    store = UserStore(client)
    try:
        store.fetch_users()
    except ApiClientError as exc:
        print(f"error: {store.error} ({exc.message})", file=sys.stderr)
        return 1

    view = build_view(args, default_page_size=settings.default_page_size)
    page = view.derive(store.records)
    for line in render_page(view, page):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

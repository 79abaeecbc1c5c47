"""路由层事务边界.

视图把业务逻辑包成闭包交给 `safe_route_call`: 成功则提交会话,失败则回滚,
并统一写一条带 module/action 的结构化日志.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar, Unpack

from werkzeug.exceptions import HTTPException

from userdir import db
from userdir.core.exceptions import AppError, SystemError
from userdir.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from userdir.core.types import ContextDict, RouteSafetyOptions

R = TypeVar("R")
EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def _rollback_and_log(level: str, exc: BaseException, fields: ContextDict) -> None:
    db.session.rollback()
    getattr(get_logger("app"), level)(
        f"{fields['action']}执行失败",
        error_type=exc.__class__.__name__,
        **fields,
    )


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    **options: Unpack[RouteSafetyOptions],
) -> R:
    """执行视图闭包并管理提交/回滚.

    Args:
        func: 视图的业务闭包,返回最终响应.
        module: 日志中的模块名,例如 "users".
        action: 日志中的动作名,例如 "create_user".
        public_error: 未预期异常对外展示的文案.
        **options: `context`/`extra` 追加到日志字段;`expected_exceptions`
            追加到按原样抛出的异常类型.

    Returns:
        闭包的返回值.

    Raises:
        AppError: 业务异常原样抛出(记 warning).
        HTTPException: 原样抛出(记 warning).
        SystemError: 其余异常与提交失败均包装为 `SystemError(public_error)`(记 error).

    """
    expected = EXPECTED_EXCEPTIONS + tuple(options.get("expected_exceptions") or ())
    fields: ContextDict = {
        **(options.get("context") or {}),
        **(options.get("extra") or {}),
        "module": module,
        "action": action,
    }

    try:
        result = func()
    except expected as exc:
        _rollback_and_log("warning", exc, {**fields, "error_message": str(exc)})
        raise
    except Exception as exc:
        _rollback_and_log("error", exc, {**fields, "unexpected": True})
        raise SystemError(public_error) from exc

    try:
        db.session.commit()
    except Exception as exc:
        _rollback_and_log("error", exc, {**fields, "unexpected": True, "commit_failed": True})
        raise SystemError(public_error) from exc
    return result


__all__ = ["safe_route_call"]

"""用户目录结构化日志.

structlog 负责组装事件(时间戳、级别、request_id、应用标识),最终交给标准库
logging 输出;级别过滤沿用 root logger 的级别(`LOG_LEVEL`).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from flask import Flask, current_app, has_app_context, has_request_context

from userdir.core.types import ContextDict, JsonValue, LoggerExtra, StructlogEventDict
from userdir.settings import APP_NAME, APP_VERSION
from userdir.utils.logging.context_vars import request_id_var

if TYPE_CHECKING:
    from structlog.typing import BindableLogger

LogField = JsonValue | ContextDict | LoggerExtra


def _add_request_id(_logger: BindableLogger, _method: str, event_dict: StructlogEventDict) -> StructlogEventDict:
    if has_request_context():
        event_dict["request_id"] = request_id_var.get()
    return event_dict


def _add_app_identity(_logger: BindableLogger, _method: str, event_dict: StructlogEventDict) -> StructlogEventDict:
    config = current_app.config if has_app_context() else {}
    event_dict["app_name"] = config.get("APP_NAME", APP_NAME)
    event_dict["app_version"] = config.get("APP_VERSION", APP_VERSION)
    event_dict["logger_name"] = getattr(_logger, "name", "app")
    return event_dict


def _ensure_configured() -> None:
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            _add_request_id,
            _add_app_identity,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=logging.INFO)


def configure_structlog(app: Flask) -> None:
    """按应用的 LOG_LEVEL 初始化日志,并记录 app context 销毁时遗留的异常."""
    _ensure_configured()
    level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, level_name, logging.INFO))

    @app.teardown_appcontext
    def log_teardown_error(exception: BaseException | None) -> None:
        if exception:
            get_system_logger().error("应用上下文异常退出", exception=str(exception))


def get_logger(name: str = "app") -> structlog.stdlib.BoundLogger:
    _ensure_configured()
    return structlog.get_logger(name)


def get_system_logger() -> structlog.stdlib.BoundLogger:
    """启动、CLI 等非请求事件使用的 logger."""
    return get_logger("system")


def _emit(level: str, message: str, module: str, exception: BaseException | None, fields: dict[str, LogField]) -> None:
    if exception is not None:
        fields["exception"] = str(exception)
        if level == "error":
            fields["exc_info"] = exception
    getattr(get_logger("app"), level)(message, module=module, **fields)


def log_info(message: str, module: str = "app", **kwargs: LogField) -> None:
    """记录业务事件.

    Example:
        >>> log_info("创建用户成功", module="users", target_user_id=1)

    """
    _emit("info", message, module, None, kwargs)


def log_warning(message: str, module: str = "app", exception: BaseException | None = None, **kwargs: LogField) -> None:
    _emit("warning", message, module, exception, kwargs)


def log_error(message: str, module: str = "app", exception: BaseException | None = None, **kwargs: LogField) -> None:
    """记录错误,带异常时附带堆栈."""
    _emit("error", message, module, exception, kwargs)


def log_debug(message: str, module: str = "app", **kwargs: LogField) -> None:
    _emit("debug", message, module, None, kwargs)


__all__ = [
    "configure_structlog",
    "get_logger",
    "get_system_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]

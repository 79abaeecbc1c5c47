"""用户目录 - Flask 应用初始化.

基于 Flask 的用户目录 REST 服务: 用户记录的增删改查与列表视图.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import click
from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from userdir.constants import HttpHeaders
from userdir.settings import Settings
from userdir.utils.response_utils import unified_error_response
from userdir.utils.logging.error_adapter import ErrorContext
from userdir.utils.structlog_config import configure_structlog, get_system_logger

# 初始化扩展
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask应用实例

    """
    from userdir.api import register_api_blueprints  # noqa: PLC0415
    from userdir.infra.logging.request_middleware import register_request_logging  # noqa: PLC0415

    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 初始化扩展
    initialize_extensions(app, resolved_settings)

    # 注册蓝图
    register_api_blueprints(app, resolved_settings)

    # 请求级 request_id 与 wide event
    register_request_logging(app)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        payload, status_code = unified_error_response(error, context=ErrorContext(error, request))
        return jsonify(payload), status_code

    register_cli_commands(app)
    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置并注册基础钩子.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,包含环境变量解析、默认值与校验结果.

    """
    app.config.from_mapping(settings.to_flask_config())
    app.json.sort_keys = False
    if settings.environment.strip().lower() in {"testing", "test"}:
        app.config["TESTING"] = True

    @app.before_request
    def detect_protocol() -> None:
        """动态检测请求协议."""
        if request.headers.get(HttpHeaders.X_FORWARDED_PROTO) == "https":
            app.config["PREFERRED_URL_SCHEME"] = "https"


def initialize_extensions(app: Flask, settings: Settings) -> None:
    """初始化数据库、迁移与 CORS 扩展.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,用于扩展初始化参数注入.

    """
    db.init_app(app)
    migrate.init_app(app, db)

    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": list(settings.cors_origins),
                "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                "allow_headers": [HttpHeaders.CONTENT_TYPE, HttpHeaders.X_REQUEST_ID],
                "expose_headers": [HttpHeaders.X_REQUEST_ID],
            },
        },
    )


def configure_logging(app: Flask) -> None:
    """非 debug/testing 环境下为根 logger 挂载滚动文件处理器.

    Args:
        app: Flask 应用实例.

    """
    if app.debug or app.testing:
        return

    log_path = Path(app.config["LOG_FILE"])
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=app.config["LOG_MAX_SIZE"],
        backupCount=app.config["LOG_BACKUP_COUNT"],
    )
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
    logging.getLogger().addHandler(file_handler)
    app.logger.info("用户目录应用启动")


def register_cli_commands(app: Flask) -> None:
    """注册 `flask` 命令行扩展."""

    @app.cli.command("seed-users")
    @click.option("--count", default=20, show_default=True, type=click.IntRange(min=0), help="演示用户数量")
    def seed_users(count: int) -> None:
        """填充演示用户,已存在的邮箱跳过."""
        from userdir.services.users import UserSeedService  # noqa: PLC0415

        outcome = UserSeedService().seed(count)
        db.session.commit()
        get_system_logger().info("seed-users 完成", created=outcome.created, skipped=outcome.skipped)
        click.echo(f"created={outcome.created} skipped={outcome.skipped}")


from userdir.models import user  # noqa: F401, E402

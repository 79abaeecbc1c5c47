"""Alembic 环境脚本.

由 `flask --app userdir db ...` 调用: 复用应用上下文中 Flask-Migrate 绑定的 Engine 与 metadata,
提供在线/离线两种迁移入口.
"""

from __future__ import annotations

import logging
from logging.config import fileConfig
from typing import TYPE_CHECKING, Any

from alembic import context
from flask import current_app

if TYPE_CHECKING:
    from alembic.runtime.environment import MigrationContext
    from sqlalchemy.engine import Engine
    from sqlalchemy.sql.schema import MetaData

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)
logger = logging.getLogger("alembic.env")


def get_engine() -> Engine:
    """获取 Flask-SQLAlchemy 绑定的 Engine."""
    return current_app.extensions["migrate"].db.engine


def get_engine_url() -> str:
    """生成带密码的连接串,`%` 需转义以写入 ini 配置."""
    return get_engine().url.render_as_string(hide_password=False).replace("%", "%%")


def get_metadata() -> MetaData:
    """返回用户目录模型的 metadata."""
    return current_app.extensions["migrate"].db.metadata


config.set_main_option("sqlalchemy.url", get_engine_url())


def run_migrations_offline() -> None:
    """离线模式: 仅依赖 URL 生成 SQL."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=get_metadata(),
        literal_binds=True,
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """在线模式: 获取连接并直接执行变更."""

    def process_revision_directives(
        _context: MigrationContext,
        _revision: tuple[str, str] | str | None,
        directives: list[Any],
    ) -> None:
        """autogenerate 无变更时不生成空脚本."""
        if getattr(config.cmd_opts, "autogenerate", False):
            script = directives[0]
            if script.upgrade_ops.is_empty():
                directives[:] = []
                logger.info("No changes in schema detected.")

    conf_args = dict(current_app.extensions["migrate"].configure_args)
    conf_args.setdefault("process_revision_directives", process_revision_directives)
    # SQLite 不支持多数 ALTER TABLE,统一走 batch 模式
    conf_args.setdefault("render_as_batch", True)

    with get_engine().connect() as connection:
        context.configure(connection=connection, target_metadata=get_metadata(), **conf_args)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

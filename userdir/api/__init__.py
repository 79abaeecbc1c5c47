"""用户目录 JSON API (Flask-RESTX) 入口.

- `/api/users/**` 为对外 REST 接口
- 提供 Swagger UI 与 OpenAPI JSON 导出能力
"""

from __future__ import annotations

from flask import Flask

from userdir.settings import Settings


def register_api_blueprints(app: Flask, settings: Settings) -> None:
    """按 Settings 注册 API blueprint, 统一挂载在 `/api` 下."""
    from userdir.api.blueprint import create_api_blueprint  # noqa: PLC0415

    api_bp = create_api_blueprint(settings)
    app.register_blueprint(api_bp, url_prefix="/api")

"""API (Flask-RESTX) Blueprint 组装.

该包仅承载对外 JSON API 的路由层与 OpenAPI 文档能力.
业务编排与数据访问复用 services/repositories.
"""

from __future__ import annotations

from typing import cast

from flask import Blueprint, Response, jsonify

from userdir.api.api import UserDirectoryApi
from userdir.api.namespaces.health import ns as health_ns
from userdir.api.namespaces.users import ns as users_ns
from userdir.settings import Settings


def create_api_blueprint(settings: Settings) -> Blueprint:
    """创建并配置 `/api` Blueprint.

    - Swagger UI: `/api/docs`(可配置关闭)
    - OpenAPI JSON: `/api/openapi.json`
    """
    blueprint = Blueprint("api", __name__)

    docs_path = "/docs" if settings.api_docs_enabled else cast(str, False)
    api = UserDirectoryApi(
        blueprint,
        title=settings.app_name,
        version=settings.app_version,
        doc=docs_path,
    )

    api.add_namespace(health_ns, path="/health")
    api.add_namespace(users_ns, path="/users")

    @blueprint.get("/openapi.json")
    def openapi_json() -> tuple[Response, int]:
        return jsonify(api.__schema__), 200

    return blueprint

"""Health namespace."""

from __future__ import annotations

from flask_restx import Namespace, fields

from userdir.api.resources.base import BaseResource

ns = Namespace("health", description="健康检查")

PingData = ns.model(
    "HealthPing",
    {
        "status": fields.String(required=True, description="服务状态", example="ok"),
    },
)


@ns.route("/ping")
class HealthPingResource(BaseResource):
    """存活探针."""

    @ns.response(200, "OK", PingData)
    def get(self):
        """服务存活检查."""
        return self.success({"status": "ok"})

"""OpenAPI: 错误封套 Model.

说明:
- 仅用于文档表达; 实际响应以全局错误处理器为准.
"""

from __future__ import annotations

from flask_restx import Namespace, fields


def get_error_envelope_model(ns: Namespace):
    """注册/获取错误封套 Model."""
    model_name = "ErrorEnvelope"
    if model_name in ns.models:
        return ns.models[model_name]

    return ns.model(
        model_name,
        {
            "success": fields.Boolean(required=True, description="是否成功", example=False),
            "error": fields.Boolean(required=True, description="是否错误", example=True),
            "error_id": fields.String(required=True, description="错误ID", example="a1b2c3d4"),
            "category": fields.String(required=True, description="错误分类", example="business"),
            "severity": fields.String(required=True, description="严重程度", example="low"),
            "message_code": fields.String(required=True, description="错误码", example="RESOURCE_NOT_FOUND"),
            "message": fields.String(required=True, description="可展示的错误摘要", example="User not found"),
            "timestamp": fields.String(required=True, description="时间戳(ISO8601)", example="2026-01-01T00:00:00"),
            "recoverable": fields.Boolean(required=True, description="是否可恢复", example=True),
            "suggestions": fields.List(fields.String, required=True, description="建议列表"),
            "context": fields.Raw(required=True, description="结构化上下文信息", example={}),
            "extra": fields.Raw(required=False, description="非敏感诊断字段(可选)", example={}),
        },
    )

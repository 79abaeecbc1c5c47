"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadSchema(BaseModel):
    """写路径 payload 的基础 schema.

    约定:
    - 默认忽略未知字段, 以兼容客户端携带的 id/createdAt 等只读字段.
    - schema 负责业务校验与错误文案.
    """

    model_config = ConfigDict(extra="ignore")


class QuerySchema(BaseModel):
    """读路径 query 参数的基础 schema.

    flask-restx reqparse 会把未传入的参数以 None 放进 dict,由各字段的 before validator 兜底默认值.
    """

    model_config = ConfigDict(extra="ignore")

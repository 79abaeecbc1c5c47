"""Users namespace."""

from __future__ import annotations

from typing import cast

from flask import request
from flask_restx import Namespace, fields

from userdir.api.models.envelope import get_error_envelope_model
from userdir.api.resources.base import BaseResource
from userdir.api.resources.query_parsers import new_parser
from userdir.constants import HttpStatus
from userdir.constants.system_constants import ErrorMessages, SuccessMessages
from userdir.schemas.users_query import UserListPageQuery
from userdir.schemas.validation import validate_or_raise
from userdir.services.users import UserDetailReadService, UsersListService, UserWriteService
from userdir.utils.structlog_config import log_info

ns = Namespace("users", description="用户目录")

ErrorEnvelope = get_error_envelope_model(ns)

UserModel = ns.model(
    "User",
    {
        "id": fields.Integer(required=True, description="用户 ID", example=1),
        "name": fields.String(required=True, description="姓名", example="Alice"),
        "email": fields.String(required=True, description="邮箱(唯一)", example="alice@example.com"),
        "phone": fields.String(required=True, description="电话(10-15 位数字)", example="+6281234567890"),
        "department": fields.String(required=True, description="部门", example="Technology"),
        "active": fields.Boolean(required=True, description="是否启用", example=True),
        "createdAt": fields.String(required=False, description="创建时间(ISO8601)"),
        "updatedAt": fields.String(required=False, description="更新时间(ISO8601)"),
    },
)

UserPayloadModel = ns.model(
    "UserPayload",
    {
        "name": fields.String(required=True, description="姓名"),
        "email": fields.String(required=True, description="邮箱"),
        "phone": fields.String(required=True, description="电话,可带前导 +"),
        "department": fields.String(required=True, description="部门"),
        "active": fields.Boolean(required=False, description="是否启用", example=True),
    },
)

UserPageModel = ns.model(
    "UserPage",
    {
        "items": fields.List(fields.Nested(UserModel)),
        "total": fields.Integer(description="筛选后总数"),
        "page": fields.Integer(description="当前页码"),
        "pages": fields.Integer(description="总页数"),
        "limit": fields.Integer(description="每页条数"),
    },
)

UserDeletedModel = ns.model(
    "UserDeleted",
    {
        "message": fields.String(required=True, example=SuccessMessages.USER_DELETED),
        "user": fields.Nested(UserModel),
    },
)


_users_page_query_parser = new_parser()
_users_page_query_parser.add_argument("search", type=str, location="args")
_users_page_query_parser.add_argument("status", type=str, location="args", help="all/active/inactive")
_users_page_query_parser.add_argument("sort", type=str, location="args", help="id/name")
_users_page_query_parser.add_argument("order", type=str, location="args", help="asc/desc")
_users_page_query_parser.add_argument("page", type=str, location="args")
_users_page_query_parser.add_argument("limit", type=str, location="args")


def _get_raw_payload() -> object:
    return request.get_json(silent=True)


@ns.route("")
class UsersResource(BaseResource):
    """用户集合资源."""

    @ns.response(200, "OK", [UserModel])
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self):
        """获取全部用户(按 id 升序)."""

        def _execute():
            records = UsersListService().list_all()
            return self.success([record.to_dict() for record in records])

        return self.safe_call(
            _execute,
            module="users",
            action="list_users",
            public_error=ErrorMessages.FETCH_USERS_FAILED,
        )

    @ns.expect(UserPayloadModel, validate=False)
    @ns.response(201, "Created", UserModel)
    @ns.response(400, "Bad Request", ErrorEnvelope)
    @ns.response(409, "Conflict", ErrorEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def post(self):
        """创建用户."""
        payload = _get_raw_payload()
        log_info("创建用户请求", module="users", has_payload=payload is not None)

        def _execute():
            user = UserWriteService().create(payload)
            return self.success(user.to_dict(), status=HttpStatus.CREATED)

        return self.safe_call(
            _execute,
            module="users",
            action="create_user",
            public_error=ErrorMessages.CREATE_USER_FAILED,
        )


@ns.route("/page")
class UsersPageResource(BaseResource):
    """服务端搜索/筛选/排序/分页视图."""

    @ns.expect(_users_page_query_parser)
    @ns.response(200, "OK", UserPageModel)
    @ns.response(400, "Bad Request", ErrorEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self):
        """分页获取用户列表."""
        query_snapshot = request.args.to_dict(flat=True)

        def _execute():
            parsed = cast("dict[str, object]", _users_page_query_parser.parse_args())
            query = validate_or_raise(UserListPageQuery, parsed).to_query()
            result = UsersListService().list_page(query)
            return self.success(
                {
                    "items": [record.to_dict() for record in result.items],
                    "total": result.total,
                    "page": result.page,
                    "pages": result.pages,
                    "limit": result.limit,
                },
            )

        return self.safe_call(
            _execute,
            module="users",
            action="list_users_page",
            public_error=ErrorMessages.FETCH_USERS_FAILED,
            context={"query_params": query_snapshot},
        )


@ns.route("/<int:user_id>")
class UserDetailResource(BaseResource):
    """单个用户资源."""

    @ns.response(200, "OK", UserModel)
    @ns.response(404, "Not Found", ErrorEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self, user_id: int):
        """获取用户."""

        def _execute():
            user = UserDetailReadService().get_user_or_error(user_id)
            return self.success(user.to_dict())

        return self.safe_call(
            _execute,
            module="users",
            action="get_user",
            public_error=ErrorMessages.FETCH_USER_FAILED,
            context={"target_user_id": user_id},
        )

    @ns.expect(UserPayloadModel, validate=False)
    @ns.response(200, "OK", UserModel)
    @ns.response(400, "Bad Request", ErrorEnvelope)
    @ns.response(404, "Not Found", ErrorEnvelope)
    @ns.response(409, "Conflict", ErrorEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def put(self, user_id: int):
        """整体更新用户."""
        payload = _get_raw_payload()

        def _execute():
            user = UserWriteService().update(user_id, payload)
            return self.success(user.to_dict())

        return self.safe_call(
            _execute,
            module="users",
            action="update_user",
            public_error=ErrorMessages.UPDATE_USER_FAILED,
            context={"target_user_id": user_id},
        )

    @ns.response(200, "OK", UserDeletedModel)
    @ns.response(404, "Not Found", ErrorEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def delete(self, user_id: int):
        """删除用户."""

        def _execute():
            outcome = UserWriteService().delete(user_id)
            return self.success(
                {
                    "message": SuccessMessages.USER_DELETED,
                    "user": outcome.record.to_dict(),
                },
            )

        return self.safe_call(
            _execute,
            module="users",
            action="delete_user",
            public_error=ErrorMessages.DELETE_USER_FAILED,
            context={"target_user_id": user_id},
        )

"""服务端与 REST 客户端共用的 HTTP 头名称."""


class HttpHeaders:
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"
    X_FORWARDED_PROTO = "X-Forwarded-Proto"
    X_REQUEST_ID = "X-Request-ID"

    APPLICATION_JSON = "application/json"

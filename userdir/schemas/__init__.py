"""请求 payload 与 query 参数的 pydantic schema."""

"""OpenAPI 文档模型."""

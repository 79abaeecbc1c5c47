"""请求级日志中间件."""

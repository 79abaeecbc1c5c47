"""用户目录 - WSGI 入口文件, 供 gunicorn 等服务器加载 `wsgi:application`."""

from __future__ import annotations

import os

os.environ.setdefault("FLASK_ENV", "production")

from userdir import create_app  # noqa: E402

application = app = create_app()


def _resolve_host_and_port() -> tuple[str, int]:
    """解析 WSGI 运行时绑定信息, 默认使用 127.0.0.1."""
    host = os.environ.get("FLASK_HOST", "127.0.0.1")
    port = int(os.environ.get("FLASK_PORT", "5001"))
    return host, port


if __name__ == "__main__":
    host, port = _resolve_host_and_port()
    application.run(host=host, port=port, debug=False)

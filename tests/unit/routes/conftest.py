# tests/unit/routes/conftest.py
"""API 契约测试专用 fixtures.

提供基于内存 SQLite 的应用实例与 test_client。
"""

import pytest

from userdir import create_app, db
from userdir.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch):
    """创建测试应用实例并建表."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")

    settings = Settings.load()
    app = create_app(settings=settings)
    app.config["TESTING"] = True

    with app.app_context():
        db.metadata.create_all(bind=db.engine)

    yield app

    with app.app_context():
        db.session.remove()
        db.metadata.drop_all(bind=db.engine)


@pytest.fixture(scope="function")
def client(app):
    """创建测试客户端."""
    return app.test_client()


@pytest.fixture(scope="function")
def create_user(client):
    """通过 API 创建用户并返回响应 JSON."""

    def _create(**overrides):
        payload = {
            "name": "Alice",
            "email": "alice@example.com",
            "phone": "+6281234567890",
            "department": "Technology",
            "active": True,
        }
        payload.update(overrides)
        response = client.post("/api/users", json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create

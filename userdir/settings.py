"""用户目录运行配置.

所有环境变量只在这里读取一次;`create_app(settings=...)` 与 CLI 只消费 `Settings`.
production 下缺少 SECRET_KEY 或 DATABASE_URL 会直接失败,其余环境回退到
随机密钥与本地 SQLite 文件.
"""

from __future__ import annotations

import json
import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from userdir.constants.system_constants import LogLevel
from userdir.constants.user_fields import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SQLITE_FALLBACK_PATH = PROJECT_ROOT / "userdata" / "userdir_dev.db"

APP_NAME = "user-directory"
APP_VERSION = "1.0.0"

DEFAULT_CLIENT_BASE_URL = "http://localhost:5001/api"
DEFAULT_CLIENT_TIMEOUT_SECONDS = 10.0

_SQLITE_ENGINE_OPTIONS = {"pool_pre_ping": True, "connect_args": {"check_same_thread": False}}
_SERVER_ENGINE_OPTIONS = {"pool_pre_ping": True, "pool_recycle": 300}


class Settings(BaseSettings):
    """服务端与客户端共用的配置."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        enable_decoding=False,
    )

    environment: str = Field(default="development", validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")
    app_name: str = Field(default=APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION
    secret_key: str = Field(default="", validation_alias="SECRET_KEY")
    database_url: str = Field(default="", validation_alias="DATABASE_URL")

    log_level: str = Field(default=LogLevel.INFO.value, validation_alias="LOG_LEVEL")
    log_file: str = Field(default="userdata/logs/app.log", validation_alias="LOG_FILE")
    log_max_size_bytes: int = Field(default=10 * 1024 * 1024, gt=0, validation_alias="LOG_MAX_SIZE")
    log_backup_count: int = Field(default=5, ge=0, validation_alias="LOG_BACKUP_COUNT")

    cors_origins: tuple[str, ...] = Field(
        default=("http://localhost:5173", "http://127.0.0.1:5173"),
        validation_alias="CORS_ORIGINS",
    )
    api_docs_enabled: bool = Field(default=True, validation_alias="API_DOCS_ENABLED")

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=MAX_PAGE_SIZE, gt=0, validation_alias="MAX_PAGE_SIZE")

    client_base_url: str = Field(default=DEFAULT_CLIENT_BASE_URL, validation_alias="USERDIR_API_URL")
    client_timeout_seconds: float = Field(
        default=DEFAULT_CLIENT_TIMEOUT_SECONDS,
        gt=0,
        validation_alias="USERDIR_API_TIMEOUT",
    )

    @classmethod
    def load(cls) -> Settings:
        """读取环境变量(以及项目根目录下可选的 .env)."""
        dotenv_path = PROJECT_ROOT / ".env"
        load_dotenv(dotenv_path=dotenv_path if dotenv_path.exists() else None, override=False)
        return cls()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {member.value for member in LogLevel}:
            allowed = "/".join(member.value for member in LogLevel)
            raise ValueError(f"LOG_LEVEL 仅支持 {allowed}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        if isinstance(value, str):
            text = value.strip()
            items = json.loads(text) if text.startswith("[") else text.split(",")
            if not isinstance(items, list):
                raise ValueError("CORS_ORIGINS 需为逗号分隔字符串或 JSON 数组")
            value = items
        if isinstance(value, (list, tuple, set)):
            return tuple(origin for origin in (str(item).strip() for item in value) if origin)
        return value

    @model_validator(mode="after")
    def _finalize(self) -> Settings:
        production = self.is_production
        if "debug" not in self.model_fields_set:
            object.__setattr__(self, "debug", not production)

        if not self.secret_key:
            if not self.debug:
                raise ValueError("SECRET_KEY environment variable must be set in production")
            object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
            logger.warning("未设置 SECRET_KEY, 本次进程使用随机密钥")

        if not self.database_url:
            if production:
                raise ValueError("DATABASE_URL environment variable must be set in production")
            object.__setattr__(self, "database_url", f"sqlite:///{SQLITE_FALLBACK_PATH.absolute()}")
            if self.environment.strip().lower() not in {"testing", "test"}:
                logger.warning("未设置 DATABASE_URL, 回退到本地 SQLite (%s)", SQLITE_FALLBACK_PATH.name)

        if production and "api_docs_enabled" not in self.model_fields_set:
            object.__setattr__(self, "api_docs_enabled", False)

        if self.default_page_size > self.max_page_size:
            raise ValueError("DEFAULT_PAGE_SIZE 不应大于 MAX_PAGE_SIZE")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    def to_flask_config(self) -> dict[str, object]:
        engine_options = _SQLITE_ENGINE_OPTIONS if self.database_url.startswith("sqlite") else _SERVER_ENGINE_OPTIONS
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "SQLALCHEMY_DATABASE_URI": self.database_url,
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
            "SQLALCHEMY_ENGINE_OPTIONS": dict(engine_options),
            "LOG_LEVEL": self.log_level,
            "LOG_FILE": self.log_file,
            "LOG_MAX_SIZE": self.log_max_size_bytes,
            "LOG_BACKUP_COUNT": self.log_backup_count,
            "CORS_ORIGINS": ",".join(self.cors_origins),
            "API_DOCS_ENABLED": self.api_docs_enabled,
            "DEFAULT_PAGE_SIZE": self.default_page_size,
            "MAX_PAGE_SIZE": self.max_page_size,
            "JSON_SORT_KEYS": False,
        }

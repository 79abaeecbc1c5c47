"""统一时间处理工具模块."""

from __future__ import annotations

from datetime import UTC, datetime


class TimeUtils:
    """统一时间处理工具类.

    数据库存储与 REST 载荷统一使用带时区的 UTC 时间.
    """

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def to_utc(dt: datetime | None) -> datetime | None:
        """将 naive/aware 时间统一为 UTC,naive 时间视为 UTC."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=UTC)
        return dt.astimezone(UTC)

    @staticmethod
    def to_iso(dt: datetime | None) -> str | None:
        """格式化为 ISO-8601 字符串."""
        normalized = TimeUtils.to_utc(dt)
        return normalized.isoformat() if normalized is not None else None


time_utils = TimeUtils()

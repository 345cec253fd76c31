"""时区处理模块"""

from datetime import datetime
from zoneinfo import ZoneInfo

from coin_report.config.settings import get_settings


def get_timezone(name: str | None = None) -> ZoneInfo:
    """获取配置的时区"""
    return ZoneInfo(name or get_settings().timezone)


def now(tz_name: str | None = None) -> datetime:
    """获取当前时区的当前时间（返回 naive datetime）"""
    return datetime.now(get_timezone(tz_name)).replace(tzinfo=None)


def format_datetime(dt: datetime, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    """格式化 datetime 为本地时区字符串"""
    if dt.tzinfo is not None:
        dt = dt.astimezone(get_timezone())
    return dt.strftime(fmt)

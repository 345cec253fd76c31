"""验证工具"""

import re
from datetime import date, datetime
from typing import Any

from coin_report.config.constants import CREDENTIAL_DELIMITER, MIN_CREDENTIAL_LENGTH
from coin_report.core.exceptions import ConfigurationError
from coin_report.core.timezone import get_timezone

_DATE_SEPARATORS = re.compile(r"[./]")


def parse_credentials(raw: str | None) -> list[str]:
    """
    解析多账号 Cookie 配置

    Args:
        raw: & 分隔的 Cookie 字符串

    Returns:
        有效 Cookie 列表（保持原顺序）

    Raises:
        ConfigurationError: 没有任何有效 Cookie
    """
    cookies = [
        clean_input(part)
        for part in (raw or "").split(CREDENTIAL_DELIMITER)
    ]
    cookies = [c for c in cookies if c and len(c) > MIN_CREDENTIAL_LENGTH]

    if not cookies:
        raise ConfigurationError(
            f"未配置有效Cookie，环境变量ksck格式：cookie1{CREDENTIAL_DELIMITER}cookie2"
        )
    return cookies


def normalize_date(value: Any, tz_name: str | None = None) -> date:
    """
    解析明细时间为日期

    兼容 2024-01-15、2024.01.15、2024/01/15（可带时间部分），
    以及秒或毫秒时间戳（按 tz_name 时区换算，默认取配置时区）。

    Raises:
        ValueError: 无法识别的时间格式
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"无法解析日期: {value!r}")

    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())

    if isinstance(value, (int, float)):
        seconds = value / 1000 if value > 10**11 else value
        return datetime.fromtimestamp(seconds, tz=get_timezone(tz_name)).date()

    text = str(value).strip()
    day_part = re.split(r"[\sT]", text, maxsplit=1)[0]
    day_part = _DATE_SEPARATORS.sub("-", day_part)
    try:
        return datetime.strptime(day_part, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"无法解析日期: {value!r}") from None


def clean_input(text: str) -> str:
    """
    清理输入文本

    Args:
        text: 输入文本

    Returns:
        清理后的文本
    """
    return text.strip()

"""工具函数模块"""

from coin_report.utils.validator import clean_input, normalize_date, parse_credentials

__all__ = [
    "parse_credentials",
    "normalize_date",
    "clean_input",
]

"""业务服务模块"""

from coin_report.services.aggregator import AccountAggregator
from coin_report.services.notification import (
    CompositeNotifier,
    Notifier,
    NullNotifier,
    PushPlusNotifier,
    TelegramNotifier,
    build_notifier,
    dispatch,
)
from coin_report.services.report import ReportRenderer

__all__ = [
    "AccountAggregator",
    "ReportRenderer",
    "Notifier",
    "NullNotifier",
    "PushPlusNotifier",
    "TelegramNotifier",
    "CompositeNotifier",
    "build_notifier",
    "dispatch",
]

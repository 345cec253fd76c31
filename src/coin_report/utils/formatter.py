"""格式化工具"""

import logging

from coin_report.config.constants import (
    COIN_RATE_NOTE,
    MAX_DETAIL_LINES,
    SEPARATOR_WIDTH,
    AccountStatus,
    LogMark,
)
from coin_report.models.account import AccountResult
from coin_report.services.aggregator import coins_to_cash, format_yuan


def format_line(mark: LogMark, prefix: str, text: str) -> str:
    """
    格式化单行日志

    Args:
        mark: 日志标记
        prefix: 分类前缀（如 信息、金币）
        text: 内容

    Returns:
        形如 "[✅] 【成功】 内容" 的字符串
    """
    return f"{mark.value} 【{prefix}】 {text}"


def separator(width: int = SEPARATOR_WIDTH, char: str = "-") -> str:
    """生成分隔线"""
    return char * width


def format_account_lines(result: AccountResult) -> list[tuple[int, str]]:
    """
    生成单个账号的控制台叙述

    Args:
        result: 账号处理结果

    Returns:
        (日志级别, 文本) 列表
    """
    if result.status == AccountStatus.FAILED:
        return [
            (logging.WARNING, format_line(LogMark.WARNING, "警告", f"获取用户信息失败：{result.error}")),
            (logging.ERROR, format_line(LogMark.ERROR, "错误", f"{result.label}处理失败：用户信息获取异常")),
        ]

    snapshot = result.snapshot
    lines = [
        (logging.INFO, separator()),
        (logging.INFO, format_line(LogMark.CASH, "用户", f"{result.label} - {result.nickname}")),
        (logging.INFO, separator()),
        (logging.INFO, format_line(LogMark.INFO, "信息", "基础收益信息")),
        (logging.INFO, format_line(LogMark.CASH, "现金", f"总现金：{format_yuan(snapshot.total_cash)}元")),
        (logging.INFO, format_line(LogMark.COIN, "金币", f"总金币：{snapshot.total_coins}")),
        (
            logging.INFO,
            format_line(
                LogMark.COIN,
                "金币",
                f"金币换算现金：{coins_to_cash(snapshot.total_coins)}元 ({COIN_RATE_NOTE})",
            ),
        ),
    ]

    if result.status == AccountStatus.PARTIAL:
        lines.append(
            (logging.ERROR, format_line(LogMark.ERROR, "错误", f"{result.label}处理异常：{result.error}"))
        )
        return lines

    lines.append(
        (logging.INFO, format_line(LogMark.SUCCESS, "成功", f"累计收益：{format_yuan(snapshot.accumulated_income)}元"))
    )
    lines.append(
        (logging.INFO, format_line(LogMark.COIN, "金币", f"今日金币收益：{result.today_earned_coins}"))
    )

    details = result.today_transactions
    if details:
        lines.append((logging.INFO, format_line(LogMark.INFO, "信息", f"今日金币明细（共{len(details)}条）")))
        for idx, item in enumerate(details[:MAX_DETAIL_LINES], start=1):
            sign = "+" if item.amount > 0 else ""
            lines.append((logging.INFO, f"   ├─ {idx}. {item.event_type}：{sign}{item.amount}金币"))
        if len(details) > MAX_DETAIL_LINES:
            lines.append((logging.INFO, f"   └─ 还有{len(details) - MAX_DETAIL_LINES}条明细，已省略"))

    return lines

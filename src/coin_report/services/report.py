"""收益报告生成服务"""

import logging
from collections.abc import Sequence
from datetime import date
from html import escape

from coin_report.config.constants import REPORT_HEADING
from coin_report.models.account import AccountResult
from coin_report.services.aggregator import coins_to_cash, format_yuan

logger = logging.getLogger(__name__)

_CONTAINER_STYLE = "width: 100%; max-width: 600px; margin: 0 auto; font-family: Arial, sans-serif;"
_HEADER_STYLE = (
    "background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; "
    "padding: 20px; border-radius: 10px; text-align: center;"
)
_CARD_STYLE = (
    "background: white; margin: 15px 0; padding: 20px; border-radius: 10px; "
    "box-shadow: 0 2px 10px rgba(0,0,0,0.1);"
)
_LABEL_STYLE = "display: inline-block; width: 120px; color: #666;"
_HIGHLIGHT_STYLE = "color: red; font-weight: bold;"
_MUTED_STYLE = "margin-left: 10px; color: #666;"
_NOTE_STYLE = "margin: 10px 0; color: #e6a23c;"
_SUMMARY_STYLE = "margin: 15px 0; padding: 15px; border-radius: 10px; background: #f5f7fa; color: #333;"


class ReportRenderer:
    """HTML 收益报告渲染器"""

    def __init__(self, heading: str = REPORT_HEADING):
        self.heading = heading

    def render(self, results: Sequence[AccountResult], run_date: date) -> str:
        """
        渲染报告

        失败账号不生成卡片，只计入处理总数。

        Args:
            results: 账号处理结果（按账号顺序）
            run_date: 报告日期

        Returns:
            HTML 字符串
        """
        parts = [f'<div style="{_CONTAINER_STYLE}">']
        parts.append(self._render_header(run_date))

        for result in results:
            if result.success:
                parts.append(self._render_card(result))

        parts.append(self._render_summary(results))
        parts.append("</div>")

        logger.debug(f"报告生成完成: {sum(r.success for r in results)} 张账号卡片")
        return "".join(parts)

    def _render_header(self, run_date: date) -> str:
        return (
            f'<div style="{_HEADER_STYLE}">'
            f'<h2 style="margin: 0; font-size: 18px;">{escape(self.heading)}</h2>'
            f'<p style="margin: 10px 0 0; font-size: 14px;">日期：{run_date.isoformat()}</p>'
            "</div>"
        )

    @staticmethod
    def _row(label: str, value: str, style: str = "", extra: str = "") -> str:
        value_html = f'<span style="{style}">{value}</span>' if style else f"<span>{value}</span>"
        return (
            '<div style="margin: 10px 0;">'
            f'<span style="{_LABEL_STYLE}">{label}：</span>'
            f"{value_html}{extra}"
            "</div>"
        )

    def _render_card(self, result: AccountResult) -> str:
        snapshot = result.snapshot
        title = f"{escape(result.label)} · {escape(result.nickname)}"

        rows = [
            f'<div style="{_CARD_STYLE}">',
            f'<h3 style="margin: 0 0 15px; font-size: 16px; color: #333;">{title}</h3>',
            self._row("总现金", f"{format_yuan(snapshot.total_cash)}元", _HIGHLIGHT_STYLE),
            self._row(
                "总金币",
                f"{snapshot.coin_balance}枚",
                extra=f'<span style="{_MUTED_STYLE}">({coins_to_cash(snapshot.coin_balance)}元)</span>',
            ),
        ]

        if result.detailed:
            rows.append(self._row("今日金币", f"{result.today_earned_coins}枚"))
            rows.append(
                self._row("累计收益", f"{format_yuan(snapshot.accumulated_income)}元", _HIGHLIGHT_STYLE)
            )
        else:
            rows.append(f'<div style="{_NOTE_STYLE}">⚠️ 收益明细获取失败，仅展示基础信息</div>')

        rows.append("</div>")
        return "".join(rows)

    @staticmethod
    def _render_summary(results: Sequence[AccountResult]) -> str:
        succeeded = [r for r in results if r.success]
        total_earned = sum(r.today_earned_coins for r in succeeded)
        total_coins = sum(r.snapshot.coin_balance for r in succeeded)

        return (
            f'<div style="{_SUMMARY_STYLE}">'
            f"<p style=\"margin: 5px 0;\">共处理{len(results)}个账号，成功{len(succeeded)}个</p>"
            f"<p style=\"margin: 5px 0;\">今日金币合计：{total_earned}枚</p>"
            f"<p style=\"margin: 5px 0;\">当前金币合计：{total_coins}枚 ({coins_to_cash(total_coins)}元)</p>"
            "</div>"
        )

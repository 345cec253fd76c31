"""收益统计任务"""

import logging
from datetime import date

from coin_report.config.constants import (
    BANNER_WIDTH,
    ERROR_TITLE,
    REPORT_TITLE,
    LogMark,
)
from coin_report.config.settings import Settings, get_settings
from coin_report.core.exceptions import ConfigurationError
from coin_report.core.run_log import RunLog
from coin_report.core.timezone import format_datetime, now
from coin_report.services.aggregator import AccountAggregator
from coin_report.services.notification import Notifier, build_notifier, dispatch
from coin_report.services.report import ReportRenderer
from coin_report.sites.base import RewardsSiteAdapter
from coin_report.sites.kuaishou import KuaishouAdapter
from coin_report.utils.formatter import format_account_lines, format_line, separator
from coin_report.utils.validator import parse_credentials

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "coin_report"


async def run_report(
    settings: Settings | None = None,
    adapter: RewardsSiteAdapter | None = None,
    notifier: Notifier | None = None,
    today: date | None = None,
    run_log: RunLog | None = None,
) -> int:
    """
    执行一次收益统计

    Args:
        settings: 配置实例，默认读取环境变量
        adapter: 接口适配器，默认快手极速版
        notifier: 通知渠道，默认按配置创建
        today: 统计日期，默认取配置时区的当前日期
        run_log: 运行日志收集器，脚本异常时作为通知正文

    Returns:
        进程退出码：未配置有效 Cookie 时为 1，其余情况为 0
    """
    settings = settings or get_settings()

    try:
        cookies = parse_credentials(settings.ksck)
    except ConfigurationError as e:
        logger.error(format_line(LogMark.ERROR, "错误", str(e)))
        return 1

    notifier = notifier or build_notifier(settings)
    run_log = run_log or RunLog()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    run_log.attach(package_logger)

    try:
        await _process(settings, cookies, adapter, notifier, today)
    except Exception as e:
        logger.error(separator(BANNER_WIDTH))
        logger.error(format_line(LogMark.ERROR, "错误", f"脚本执行出错：{e}"))
        logger.error(separator(BANNER_WIDTH))
        logger.debug("异常详情", exc_info=True)
        await dispatch(notifier, ERROR_TITLE, run_log.text)
    finally:
        run_log.detach(package_logger)

    return 0


async def _process(
    settings: Settings,
    cookies: list[str],
    adapter: RewardsSiteAdapter | None,
    notifier: Notifier,
    today: date | None,
) -> None:
    """处理全部账号并发送报告"""
    started_at = now(settings.timezone)
    today = today or started_at.date()

    logger.info(separator(BANNER_WIDTH))
    logger.info(format_line(LogMark.INFO, "信息", f"快手当日金币收益记录启动 - {format_datetime(started_at)}"))
    logger.info(separator(BANNER_WIDTH))

    if len(cookies) == 1:
        logger.warning(format_line(LogMark.WARNING, "警告", "仅检测到1个有效Cookie，如需多账号请用&分隔配置"))
    else:
        logger.info(format_line(LogMark.INFO, "信息", f"检测到{len(cookies)}个有效Cookie"))

    aggregator = AccountAggregator(adapter or KuaishouAdapter(settings))
    results = await aggregator.aggregate_all(cookies, today, settings.max_concurrency)

    for result in results:
        for level, line in format_account_lines(result):
            logger.log(level, line)

    total_earned = sum(r.today_earned_coins for r in results if r.success)

    logger.info(separator(BANNER_WIDTH))
    logger.info(format_line(LogMark.SUCCESS, "成功", f"当日金币收益记录执行完毕（共处理{len(cookies)}个账号）"))
    logger.info(format_line(LogMark.COIN, "金币", f"今日金币合计：{total_earned}"))
    logger.info(separator(BANNER_WIDTH))

    body = ReportRenderer().render(results, today)
    await dispatch(notifier, REPORT_TITLE, body)

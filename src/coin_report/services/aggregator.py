"""账号数据汇总服务"""

import asyncio
import logging
import random
import string
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from coin_report.config.constants import (
    COINS_PER_YUAN,
    PLACEHOLDER_NICKNAME,
    AccountStatus,
)
from coin_report.core.exceptions import AccountFetchError
from coin_report.models.account import AccountResult, AccountSnapshot, Transaction
from coin_report.models.payloads import BasicInfo, DetailInfo
from coin_report.sites.base import RewardsSiteAdapter

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def coins_to_cash(coins: int) -> str:
    """金币换算为现金（元），保留两位小数"""
    cash = Decimal(coins) / COINS_PER_YUAN
    return str(cash.quantize(_CENT, rounding=ROUND_HALF_UP))


def format_yuan(amount: Decimal) -> str:
    """金额保留两位小数"""
    return str(Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP))


def today_transactions(
    transactions: Iterable[Transaction],
    today: date,
) -> list[Transaction]:
    """筛选今日明细（保持原顺序）"""
    return [t for t in transactions if t.date == today]


def redemption_cost(transactions: Iterable[Transaction], today: date) -> int:
    """今日兑换消耗：今日负数明细的绝对值之和"""
    return sum(abs(t.amount) for t in today_transactions(transactions, today) if t.amount < 0)


def today_earned(balance: int, cost: int) -> int:
    """
    今日收益金币

    兑换会扣减余额但不属于收益，所以把今日兑换消耗加回余额，
    结果不小于 0。
    """
    return max(balance + cost, 0)


def placeholder_nickname() -> str:
    """生成随机占位昵称"""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=4))
    return f"{PLACEHOLDER_NICKNAME}{suffix}"


def build_snapshot(basic: BasicInfo, detail: DetailInfo | None = None) -> AccountSnapshot:
    """
    合并两个接口的数据

    Args:
        basic: 收益概览
        detail: 账户概览，获取失败时为 None

    Returns:
        账号快照
    """
    nickname = basic.nickname or placeholder_nickname()

    if detail is None:
        return AccountSnapshot(
            nickname=nickname,
            total_cash=basic.total_cash,
            total_coins=basic.total_coin,
            coin_balance=basic.total_coin,
            accumulated_income=Decimal(0),
        )

    coin_balance = detail.coin_balance if detail.coin_balance is not None else basic.total_coin
    transactions = tuple(
        Transaction(date=r.created_on, event_type=r.event_type, amount=r.amount)
        for r in detail.records
    )

    return AccountSnapshot(
        nickname=nickname,
        total_cash=basic.total_cash,
        total_coins=basic.total_coin,
        coin_balance=coin_balance,
        accumulated_income=detail.accumulative_amount,
        transactions=transactions,
    )


class AccountAggregator:
    """账号汇总服务"""

    def __init__(self, adapter: RewardsSiteAdapter):
        self.adapter = adapter

    async def aggregate(self, cookie: str, index: int, today: date) -> AccountResult:
        """
        处理单个账号

        收益概览失败时账号判定为失败，不再请求账户概览；
        账户概览失败时返回部分成功结果，今日收益记为 0。

        Args:
            cookie: 账号 Cookie
            index: 账号序号（从 0 开始）
            today: 今日日期

        Returns:
            账号处理结果
        """
        try:
            basic = await self.adapter.fetch_basic_info(cookie)
        except AccountFetchError as e:
            return AccountResult.failed(index, e.message)

        try:
            detail = await self.adapter.fetch_detail_info(cookie)
        except AccountFetchError as e:
            snapshot = build_snapshot(basic)
            return AccountResult(
                index=index,
                status=AccountStatus.PARTIAL,
                nickname=snapshot.nickname,
                snapshot=snapshot,
                error=e.message,
            )

        snapshot = build_snapshot(basic, detail)
        cost = redemption_cost(snapshot.transactions, today)

        return AccountResult(
            index=index,
            status=AccountStatus.SUCCESS,
            nickname=snapshot.nickname,
            snapshot=snapshot,
            today_earned_coins=today_earned(snapshot.coin_balance, cost),
            today_transactions=tuple(today_transactions(snapshot.transactions, today)),
        )

    async def _aggregate_guarded(self, cookie: str, index: int, today: date) -> AccountResult:
        """单个账号的意外异常只影响该账号"""
        try:
            return await self.aggregate(cookie, index, today)
        except Exception as e:
            logger.error(f"账号{index + 1}处理异常: {e}", exc_info=True)
            return AccountResult.failed(index, f"处理异常：{e}")

    async def aggregate_all(
        self,
        cookies: Sequence[str],
        today: date,
        max_concurrency: int = 1,
    ) -> list[AccountResult]:
        """
        处理全部账号

        Args:
            cookies: Cookie 列表
            today: 今日日期
            max_concurrency: 最大并发数，1 为顺序执行

        Returns:
            与 cookies 顺序一致的结果列表
        """
        if max_concurrency <= 1:
            results = []
            for index, cookie in enumerate(cookies):
                results.append(await self._aggregate_guarded(cookie, index, today))
            return results

        semaphore = asyncio.Semaphore(max_concurrency)

        async def run_one(index: int, cookie: str) -> AccountResult:
            async with semaphore:
                return await self._aggregate_guarded(cookie, index, today)

        return list(await asyncio.gather(
            *(run_one(index, cookie) for index, cookie in enumerate(cookies))
        ))

"""账号数据模型"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from coin_report.config.constants import AccountStatus


@dataclass(frozen=True)
class Transaction:
    """金币明细记录"""

    date: date
    event_type: str
    amount: int  # 负数为兑换消耗，正数为收益


@dataclass(frozen=True)
class AccountSnapshot:
    """单个账号本次运行获取到的数据"""

    nickname: str
    total_cash: Decimal  # 元
    total_coins: int
    coin_balance: int
    accumulated_income: Decimal  # 元
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class AccountResult:
    """账号处理结果"""

    index: int
    status: AccountStatus
    nickname: str
    snapshot: AccountSnapshot | None = None
    today_earned_coins: int = 0
    today_transactions: tuple[Transaction, ...] = ()
    error: str | None = None

    @property
    def label(self) -> str:
        """账号显示标签（从 1 开始）"""
        return f"账号{self.index + 1}"

    @property
    def success(self) -> bool:
        """基础信息是否获取成功（部分成功也算）"""
        return self.status != AccountStatus.FAILED

    @property
    def detailed(self) -> bool:
        """明细是否获取成功"""
        return self.status == AccountStatus.SUCCESS

    @classmethod
    def failed(cls, index: int, error: str, nickname: str = "未知昵称") -> "AccountResult":
        """构造失败结果"""
        return cls(
            index=index,
            status=AccountStatus.FAILED,
            nickname=nickname,
            error=error,
        )

"""数据模型模块"""

from coin_report.models.account import AccountResult, AccountSnapshot, Transaction
from coin_report.models.payloads import (
    ApiEnvelope,
    BasicInfo,
    CoinAccountPage,
    CoinRecord,
    DetailInfo,
    UserData,
)

__all__ = [
    "Transaction",
    "AccountSnapshot",
    "AccountResult",
    "ApiEnvelope",
    "BasicInfo",
    "UserData",
    "CoinRecord",
    "CoinAccountPage",
    "DetailInfo",
]

"""测试公共夹具"""

from datetime import date

import pytest

from coin_report.config.settings import Settings
from coin_report.core.exceptions import AccountFetchError
from coin_report.models.payloads import BasicInfo, DetailInfo
from coin_report.sites.base import RewardsSiteAdapter

TODAY = date(2024, 1, 15)

COOKIE_A = "kuaishou.api_st=cookie-account-a"
COOKIE_B = "kuaishou.api_st=cookie-account-b"


class FakeAdapter(RewardsSiteAdapter):
    """按 Cookie 返回预设数据的适配器"""

    def __init__(self, basic: dict | None = None, detail: dict | None = None):
        self.basic = basic or {}
        self.detail = detail or {}
        self.calls: list[tuple[str, str]] = []

    async def fetch_basic_info(self, cookie: str) -> BasicInfo:
        self.calls.append(("basic", cookie))
        value = self.basic[cookie]
        if isinstance(value, Exception):
            raise value
        return value

    async def fetch_detail_info(self, cookie: str) -> DetailInfo:
        self.calls.append(("detail", cookie))
        value = self.detail[cookie]
        if isinstance(value, Exception):
            raise value
        return value


class RecordingNotifier:
    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    async def send(self, title: str, body: str) -> bool:
        self.sent.append((title, body))
        return True


def make_basic(nickname="小明", total_cash="12.34", total_coin=25000) -> BasicInfo:
    return BasicInfo.model_validate(
        {
            "userData": {"nickname": nickname},
            "totalCash": total_cash,
            "totalCoin": total_coin,
        }
    )


def make_detail(coin_balance=3000, accumulative_amount="88.80", records=None) -> DetailInfo:
    if records is None:
        records = [
            {"createTime": "2024-01-15 08:00:00", "eventType": "看视频", "amount": 500},
            {"createTime": "2024.01.15 09:30:00", "eventType": "金币兑换", "amount": -1000},
            {"createTime": "2024-01-14 23:59:59", "eventType": "金币兑换", "amount": -7000},
        ]
    return DetailInfo.model_validate(
        {
            "coinBalance": coin_balance,
            "accumulativeAmount": accumulative_amount,
            "coinAccountPage": {"data": records},
        }
    )


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ksck=f"{COOKIE_A}&{COOKIE_B}",
        timezone="Asia/Shanghai",
        pushplus_token="",
        telegram_bot_token="",
        telegram_chat_id="",
        socks5_proxy="",
    )


@pytest.fixture
def fetch_error():
    return AccountFetchError("接口返回异常：未登录", endpoint="basicInfo")


@pytest.fixture
def notifier():
    return RecordingNotifier()

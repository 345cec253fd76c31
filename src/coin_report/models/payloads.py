"""接口响应数据结构"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from coin_report.config.constants import API_SUCCESS_RESULT, MAX_ABS_AMOUNT
from coin_report.utils.validator import normalize_date


def _check_magnitude(number: Decimal) -> None:
    """超出上限的数值视为数据异常"""
    if abs(number) > MAX_ABS_AMOUNT:
        raise ValueError(f"数值超出范围: {number}")


def _to_decimal(value: Any) -> Decimal:
    """宽松转换为 Decimal，无法解析时返回 0"""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not number.is_finite():
        return Decimal(0)
    _check_magnitude(number)
    return number


def _to_int(value: Any) -> int | None:
    """宽松转换为整数，无法解析时返回 None"""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    _check_magnitude(number)
    return int(number)


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApiEnvelope(_Payload):
    """接口通用外层结构"""

    result: int | None = None
    msg: str | None = None
    error_msg: str | None = None
    data: dict | None = None

    @property
    def ok(self) -> bool:
        """result 为成功标识且携带 data"""
        return self.result == API_SUCCESS_RESULT and self.data is not None

    @property
    def message(self) -> str:
        return self.msg or self.error_msg or "未知错误"


class UserData(_Payload):
    nickname: str | None = None


class BasicInfo(_Payload):
    """收益概览（basicInfo）"""

    user_data: UserData | None = Field(default=None, alias="userData")
    total_cash: Decimal = Field(default=Decimal(0), alias="totalCash")
    total_coin: int = Field(default=0, alias="totalCoin")

    @field_validator("total_cash", mode="before")
    @classmethod
    def parse_cash(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_validator("total_coin", mode="before")
    @classmethod
    def parse_coin(cls, v: Any) -> int:
        return _to_int(v) or 0

    @property
    def nickname(self) -> str | None:
        if self.user_data and self.user_data.nickname:
            return self.user_data.nickname
        return None


class CoinRecord(_Payload):
    """金币明细条目"""

    created_on: date = Field(alias="createTime")
    event_type: str = Field(default="", alias="eventType")
    amount: int = 0

    @field_validator("created_on", mode="before")
    @classmethod
    def parse_create_time(cls, v: Any, info: ValidationInfo) -> date:
        if isinstance(v, date):
            return v
        tz_name = (info.context or {}).get("timezone")
        return normalize_date(v, tz_name)

    @field_validator("event_type", mode="before")
    @classmethod
    def parse_event_type(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> int:
        return _to_int(v) or 0


class CoinAccountPage(_Payload):
    data: list[CoinRecord] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def parse_data(cls, v: Any) -> list:
        return v or []


class DetailInfo(_Payload):
    """账户概览（account/overview）"""

    coin_balance: int | None = Field(default=None, alias="coinBalance")
    accumulative_amount: Decimal = Field(default=Decimal(0), alias="accumulativeAmount")
    coin_account_page: CoinAccountPage = Field(default_factory=CoinAccountPage, alias="coinAccountPage")

    @field_validator("coin_balance", mode="before")
    @classmethod
    def parse_balance(cls, v: Any) -> int | None:
        return _to_int(v)

    @field_validator("accumulative_amount", mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_validator("coin_account_page", mode="before")
    @classmethod
    def parse_page(cls, v: Any) -> Any:
        return v or {}

    @property
    def records(self) -> list[CoinRecord]:
        return self.coin_account_page.data

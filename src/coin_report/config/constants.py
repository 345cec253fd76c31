"""常量定义模块"""

from enum import Enum
from typing import Final


# ==================== HTTP 请求配置 ====================
DEFAULT_HTTP_HEADERS: Final[dict[str, str]] = {
    "User-Agent": "Mozilla/5.0 (Linux; Android 10; Redmi K30 Pro) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/110.0.0.0 Mobile Safari/537.36",
    "Referer": "https://nebula.kuaishou.com/",
    "Content-Type": "application/json;charset=UTF-8",
}


# ==================== 请求超时配置 ====================
DEFAULT_TIMEOUT: Final[int] = 15  # 默认超时 15 秒


# ==================== 接口地址 ====================
BASIC_INFO_URL: Final[str] = (
    "https://nebula.kuaishou.com/rest/n/nebula/activity/earn/overview/basicInfo"
    "?source=bottom_guide_first"
)
DETAIL_INFO_URL: Final[str] = "https://nebula.kuaishou.com/rest/n/nebula/account/overview"

# 接口成功标识
API_SUCCESS_RESULT: Final[int] = 1

PUSHPLUS_URL: Final[str] = "http://www.pushplus.plus/send"
TELEGRAM_MESSAGE_LIMIT: Final[int] = 4096


# ==================== Cookie 配置 ====================
CREDENTIAL_DELIMITER: Final[str] = "&"
MIN_CREDENTIAL_LENGTH: Final[int] = 10


# ==================== 金币换算 ====================
COINS_PER_YUAN: Final[int] = 10000
COIN_RATE_NOTE: Final[str] = "10000金币=1元"

# 接口数值上限（金额、金币数），超出视为数据异常
MAX_ABS_AMOUNT: Final[int] = 10**15


# ==================== 报告配置 ====================
REPORT_TITLE: Final[str] = "快手收益记录"
REPORT_HEADING: Final[str] = "快手多账号收益报告"
ERROR_TITLE: Final[str] = "脚本异常"
PLACEHOLDER_NICKNAME: Final[str] = "未知账号"
MAX_DETAIL_LINES: Final[int] = 10


# ==================== 账号处理状态 ====================
class AccountStatus(str, Enum):
    """账号处理状态枚举"""
    SUCCESS = "success"
    PARTIAL = "partial"  # 基础信息成功，明细获取失败
    FAILED = "failed"


# ==================== 日志标记 ====================
class LogMark(str, Enum):
    """日志前缀标记"""
    SUCCESS = "[✅]"
    WARNING = "[⚠️]"
    ERROR = "[❌]"
    INFO = "[ℹ️]"
    COIN = "[🪙]"
    CASH = "[💰]"


SEPARATOR_WIDTH: Final[int] = 40
BANNER_WIDTH: Final[int] = 50

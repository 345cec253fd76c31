"""异常定义模块"""


class CoinReportError(Exception):
    """统计脚本异常基类"""


class ConfigurationError(CoinReportError):
    """配置错误（致命，终止运行）"""


class AccountFetchError(CoinReportError):
    """
    单个账号接口请求失败

    网络错误、超时、接口返回异常或数据格式错误都归为此类，
    只影响当前账号。
    """

    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class NotificationError(CoinReportError):
    """通知发送失败（只记录日志，不影响退出码）"""

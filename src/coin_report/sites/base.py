"""站点适配器基类"""

from abc import ABC, abstractmethod

from coin_report.models.payloads import BasicInfo, DetailInfo


class RewardsSiteAdapter(ABC):
    """收益接口适配器基类"""

    @abstractmethod
    async def fetch_basic_info(self, cookie: str) -> BasicInfo:
        """
        获取收益概览

        Args:
            cookie: 账号 Cookie

        Returns:
            校验后的收益概览

        Raises:
            AccountFetchError: 请求失败或数据异常
        """
        pass

    @abstractmethod
    async def fetch_detail_info(self, cookie: str) -> DetailInfo:
        """
        获取账户概览（余额、累计收益、金币明细）

        Args:
            cookie: 账号 Cookie

        Returns:
            校验后的账户概览

        Raises:
            AccountFetchError: 请求失败或数据异常
        """
        pass

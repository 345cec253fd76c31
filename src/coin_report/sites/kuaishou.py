"""快手极速版收益接口适配器"""

import logging
from typing import TypeVar

from curl_cffi.requests import AsyncSession, errors
from pydantic import BaseModel, ValidationError

from coin_report.config.constants import (
    BASIC_INFO_URL,
    DEFAULT_HTTP_HEADERS,
    DETAIL_INFO_URL,
)
from coin_report.config.settings import Settings, get_settings
from coin_report.core.exceptions import AccountFetchError
from coin_report.models.payloads import ApiEnvelope, BasicInfo, DetailInfo
from coin_report.sites.base import RewardsSiteAdapter

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class KuaishouAdapter(RewardsSiteAdapter):
    """快手极速版（nebula）接口适配器"""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    async def fetch_basic_info(self, cookie: str) -> BasicInfo:
        """获取收益概览"""
        return await self._get(BASIC_INFO_URL, cookie, BasicInfo)

    async def fetch_detail_info(self, cookie: str) -> DetailInfo:
        """获取账户概览"""
        return await self._get(DETAIL_INFO_URL, cookie, DetailInfo)

    def _new_session(self) -> AsyncSession:
        proxy_kwargs = self.settings.curl_proxy or {}
        return AsyncSession(impersonate=self.settings.impersonate_browser, **proxy_kwargs)

    async def _get(self, url: str, cookie: str, schema: type[PayloadT]) -> PayloadT:
        """
        发送 GET 请求并校验响应（内部方法）

        只有 HTTP 200、result 为成功标识且携带 data 时才算成功，
        其余情况统一抛出 AccountFetchError。
        """
        headers = DEFAULT_HTTP_HEADERS.copy()
        headers["Cookie"] = cookie

        session = self._new_session()

        try:
            logger.debug(f"请求快手接口: {url}")
            response = await session.get(
                url,
                headers=headers,
                timeout=self.settings.request_timeout,
            )

            logger.debug(f"快手接口响应: status={response.status_code}")

            if response.status_code != 200:
                raise AccountFetchError(f"HTTP {response.status_code}", endpoint=url)

            try:
                body = response.json()
            except ValueError:
                raise AccountFetchError(
                    f"响应非 JSON 格式: {response.text[:100]}", endpoint=url
                ) from None

            if not isinstance(body, dict):
                raise AccountFetchError("响应格式异常", endpoint=url)

            envelope = ApiEnvelope.model_validate(body)
            if not envelope.ok:
                raise AccountFetchError(f"接口返回异常：{envelope.message}", endpoint=url)

            return schema.model_validate(
                envelope.data, context={"timezone": self.settings.timezone}
            )

        except errors.RequestsError as e:
            raise AccountFetchError(f"请求失败：{e}", endpoint=url) from e

        except ValidationError as e:
            raise AccountFetchError(
                f"数据格式异常：{e.error_count()} 个字段校验失败", endpoint=url
            ) from e

        finally:
            await session.close()

"""通知服务"""

import logging
import re
from collections.abc import Sequence
from html import escape, unescape
from typing import Protocol

from curl_cffi.requests import AsyncSession, errors
from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from coin_report.config.constants import DEFAULT_TIMEOUT, PUSHPLUS_URL, TELEGRAM_MESSAGE_LIMIT
from coin_report.config.settings import Settings
from coin_report.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

_BLOCK_END = re.compile(r"</(div|p|h[1-6])>|<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n{3,}")


class Notifier(Protocol):
    """通知渠道接口"""

    async def send(self, title: str, body: str) -> bool:
        """
        发送通知

        Returns:
            是否发送成功
        """
        ...


class NullNotifier:
    """未配置通知渠道时使用，只记录发送请求"""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    async def send(self, title: str, body: str) -> bool:
        self.sent.append((title, body))
        logger.warning("未配置通知渠道，跳过通知")
        return False


class PushPlusNotifier:
    """PushPlus 推送（支持 HTML 正文）"""

    def __init__(self, token: str, proxy_kwargs: dict | None = None):
        self.token = token
        self.proxy_kwargs = proxy_kwargs or {}

    async def send(self, title: str, body: str) -> bool:
        payload = {
            "token": self.token,
            "title": title,
            "content": body,
            "template": "html",
        }

        session = AsyncSession(**self.proxy_kwargs)

        try:
            response = await session.post(PUSHPLUS_URL, json=payload, timeout=DEFAULT_TIMEOUT)
            data = response.json()
        except (errors.RequestsError, ValueError) as e:
            raise NotificationError(f"PushPlus 请求失败: {e}") from e
        finally:
            await session.close()

        if data.get("code") != 200:
            raise NotificationError(f"PushPlus 推送失败: {data.get('msg', '未知错误')}")

        logger.info("PushPlus 推送成功")
        return True


def html_to_telegram(title: str, body: str) -> str:
    """
    把 HTML 报告转换为 Telegram 可用的文本

    Telegram 只支持少量 HTML 标签，这里去掉所有样式标签，
    标题加粗，超长时截断。
    """
    text = _BLOCK_END.sub("\n", body)
    text = unescape(_TAG.sub("", text))
    lines = [line.strip() for line in text.splitlines()]
    text = _BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()

    header = f"<b>{escape(title)}</b>\n\n"
    budget = TELEGRAM_MESSAGE_LIMIT - len(header)
    escaped = escape(text)
    if len(escaped) <= budget:
        return header + escaped

    # 按字符截断原文再转义，避免截断实体（如 &amp;）
    kept: list[str] = []
    size = 0
    for char in text:
        piece = escape(char)
        if size + len(piece) > budget - 3:
            break
        kept.append(piece)
        size += len(piece)
    return header + "".join(kept) + "..."


class TelegramNotifier:
    """Telegram Bot 推送"""

    def __init__(self, token: str, chat_id: str):
        self.token = token
        self.chat_id = chat_id

    async def send(self, title: str, body: str) -> bool:
        try:
            async with Bot(self.token) as bot:
                await bot.send_message(
                    chat_id=self.chat_id,
                    text=html_to_telegram(title, body),
                    parse_mode=ParseMode.HTML,
                )
        except TelegramError as e:
            raise NotificationError(f"Telegram 推送失败: {e}") from e

        logger.info(f"Telegram 推送成功: chat_id={self.chat_id}")
        return True


class CompositeNotifier:
    """依次发送到多个渠道，任一成功即视为成功"""

    def __init__(self, notifiers: Sequence[Notifier]):
        self.notifiers = list(notifiers)

    async def send(self, title: str, body: str) -> bool:
        results = [await dispatch(notifier, title, body) for notifier in self.notifiers]
        return any(results)


def build_notifier(settings: Settings) -> Notifier:
    """
    根据配置创建通知渠道

    Args:
        settings: 配置实例

    Returns:
        通知渠道，未配置任何渠道时返回 NullNotifier
    """
    notifiers: list[Notifier] = []

    if settings.pushplus_token:
        notifiers.append(PushPlusNotifier(settings.pushplus_token, settings.curl_proxy))
    if settings.has_telegram:
        notifiers.append(TelegramNotifier(settings.telegram_bot_token, settings.telegram_chat_id))

    if not notifiers:
        return NullNotifier()
    if len(notifiers) == 1:
        return notifiers[0]
    return CompositeNotifier(notifiers)


async def dispatch(notifier: Notifier, title: str, body: str) -> bool:
    """
    发送通知，失败只记录日志

    Returns:
        是否发送成功
    """
    try:
        return await notifier.send(title, body)
    except NotificationError as e:
        logger.error(f"通知发送失败: {e}")
    except Exception as e:
        logger.error(f"通知发送异常: {e}", exc_info=True)
    return False

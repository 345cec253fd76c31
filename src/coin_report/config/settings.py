"""配置管理模块"""

import logging

from pydantic import Field, ConfigDict, field_validator
from pydantic_settings import BaseSettings

from coin_report.config.constants import DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """应用配置类"""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ==================== 账号配置 ====================
    ksck: str = Field(default="", alias="KSCK", description="多账号 Cookie（& 分隔）")

    # ==================== 运行时配置 ====================
    timezone: str = Field(default="Asia/Shanghai", description="时区配置")
    request_timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0, description="请求超时（秒）")
    max_concurrency: int = Field(default=1, ge=1, description="并发处理账号数，1 为顺序执行")
    impersonate_browser: str = Field(default="chrome136", description="curl_cffi 模拟浏览器版本")

    # ==================== SOCKS5 代理配置 ====================
    socks5_proxy: str = Field(default="", alias="SOCKS5_PROXY", description="SOCKS5 代理地址")

    # ==================== 通知配置 ====================
    pushplus_token: str = Field(default="", alias="PUSHPLUS_TOKEN", description="PushPlus Token")
    telegram_bot_token: str = Field(default="", alias="TG_BOT_TOKEN", description="Telegram Bot Token")
    telegram_chat_id: str = Field(default="", alias="TG_USER_ID", description="Telegram 接收者 ID")

    # ==================== 日志配置 ====================
    log_level_str: str = Field(default="INFO", alias="LOG_LEVEL", description="日志级别: DEBUG, INFO, WARNING, ERROR")

    @field_validator("log_level_str")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got '{v}'")
        return v_upper

    @property
    def log_level(self) -> int:
        """获取日志级别常量"""
        return getattr(logging, self.log_level_str)

    @property
    def has_telegram(self) -> bool:
        """是否配置了 Telegram 推送"""
        return bool(self.telegram_bot_token and self.telegram_chat_id)

    @property
    def curl_proxy(self) -> dict | None:
        """
        获取用于 curl_cffi 的代理配置

        使用 socks5h:// 协议（对应 curl 的 --socks5-hostname），
        让代理服务器进行 DNS 解析。

        Returns:
            代理配置字典，未配置时返回 None
        """
        if not self.socks5_proxy:
            return None

        proxy_url = self.socks5_proxy
        if proxy_url.startswith("socks5://"):
            proxy_url = proxy_url.replace("socks5://", "socks5h://", 1)

        return {"proxies": {"http": proxy_url, "https": proxy_url}}


# 全局配置实例
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

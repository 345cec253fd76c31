"""脚本启动入口"""

import asyncio
import logging
import sys
import time
from datetime import datetime

from coin_report.config.settings import Settings, get_settings
from coin_report.core.timezone import get_timezone
from coin_report.tasks.report_job import run_report

RESET = "\033[0m"

# 日志级别颜色映射（清爽配色）
LOG_COLORS = {
    logging.DEBUG: "\033[38;5;245m",      # 灰色（柔和）
    logging.INFO: "\033[38;5;79m",        # 青绿色（清爽）
    logging.WARNING: "\033[38;5;221m",    # 柔和橙黄
    logging.ERROR: "\033[38;5;203m",      # 柔和红
    logging.CRITICAL: "\033[1;38;5;203m", # 粗体柔和红
}

# 日志级别名称映射
LOG_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO ",
    logging.WARNING: "WARN ",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "CRIT ",
}


class ColorFormatter(logging.Formatter):
    """带颜色和对齐的日志格式化器"""

    def __init__(self, *args, tz_name: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.tz = get_timezone(tz_name)

    def formatTime(self, record, datefmt=None):
        """使用配置时区的时间格式化器"""
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        ct = dt.replace(tzinfo=None).timetuple()

        if datefmt:
            return time.strftime(datefmt, ct)
        return time.strftime(self.default_time_format, ct)[:19]

    def format(self, record):
        """格式化日志记录，添加颜色"""
        level_color = LOG_COLORS.get(record.levelno, "")
        record.levelname = LOG_LEVEL_NAMES.get(record.levelno, record.levelname)

        result = super().format(record)

        if level_color:
            result = f"{level_color}{result}{RESET}"

        return result


def setup_logging(settings: Settings) -> None:
    """配置控制台日志"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColorFormatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        tz_name=settings.timezone,
    ))
    logging.basicConfig(level=settings.log_level, handlers=[handler], force=True)

    # 隐藏冗余的库日志
    logging.getLogger("asyncio").setLevel(logging.INFO)
    logging.getLogger("telegram").setLevel(logging.INFO)
    logging.getLogger("telegram.ext").setLevel(logging.INFO)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> None:
    """启动统计任务"""
    settings = get_settings()
    setup_logging(settings)
    sys.exit(asyncio.run(run_report(settings)))


if __name__ == "__main__":
    main()

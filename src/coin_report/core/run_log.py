"""运行日志累积模块"""

import logging


class RunLog(logging.Handler):
    """
    收集单次运行的日志文本

    挂载到日志记录器上，脚本异常时把累积的内容作为通知正文发送。
    """

    def __init__(self, level: int = logging.INFO):
        super().__init__(level)
        self._lines: list[str] = []
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._lines.append(self.format(record))
        except Exception:
            self.handleError(record)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def attach(self, logger: logging.Logger) -> "RunLog":
        """挂载到指定记录器"""
        logger.addHandler(self)
        return self

    def detach(self, logger: logging.Logger) -> None:
        """从指定记录器移除"""
        logger.removeHandler(self)

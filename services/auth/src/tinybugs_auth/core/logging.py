"""日志初始化。"""

import logging

from tinybugs_auth.core.config import get_settings

LOGGER_NAME = "tinybugs_auth"


def setup_logging() -> None:
    """初始化日志输出格式与级别，由宿主应用在启动时调用一次。"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(LOGGER_NAME).setLevel(settings.log_level)


def get_logger(name: str) -> logging.Logger:
    """返回包命名空间下的模块日志器。"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")

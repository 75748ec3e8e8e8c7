"""
日志模块

使用 loguru 输出各阶段的进度消息。
"""

import os
import sys
from typing import Optional

from loguru import logger

PROGRESS_FORMAT = "<level>{message}</level>"
DEBUG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def debug_from_env() -> bool:
    return os.environ.get("MODGRAB_DEBUG", "0") == "1"


def setup_logger(
    debug: Optional[bool] = None,
    sink=None,
    colorize: Optional[bool] = None,
) -> None:
    """
    设置日志记录器

    正常模式只输出进度消息本身；调试模式附带时间、级别和代码位置，
    并打开请求细节与完整的异常回溯。

    Args:
        debug: 是否启用调试模式，None 时读取 MODGRAB_DEBUG 环境变量
        sink: 输出目标，默认为当前的标准输出
        colorize: 是否启用颜色，None 时由 loguru 根据终端判断
    """
    if debug is None:
        debug = debug_from_env()

    if sink is None:
        sink = sys.stdout

    logger.remove()
    logger.add(
        sink=sink,
        format=DEBUG_FORMAT if debug else PROGRESS_FORMAT,
        level="DEBUG" if debug else "INFO",
        colorize=colorize,
        backtrace=debug,
        diagnose=debug,
    )

    if debug:
        logger.debug("DEBUG 模式已启用")


__all__ = ["logger", "setup_logger"]

"""日志工具模块"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# 作为库被引用时不输出日志，由CLI等入口调用 setup_logger 开启
logger.disable("b64_serde")


def setup_logger(
    log_path: Optional[Path] = None,
    level: str = "INFO",
    rotation: str = "100 MB",
    retention: int = 7,
    format_string: Optional[str] = None
) -> None:
    """
    配置 Loguru 日志
    :param log_path: 日志文件路径（为空时只输出到stderr）
    :param level: 日志级别
    :param rotation: 轮转规则
    :param retention: 保留天数
    :param format_string: 自定义格式字符串
    """
    logger.remove()
    logger.enable("b64_serde")

    logger.add(sys.stderr, level=level, format=format_string or CONSOLE_FORMAT)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level=level,
            rotation=rotation,
            retention=f"{retention} days",
            format=format_string or FILE_FORMAT,
        )


def get_logger():
    """获取 logger 实例"""
    return logger

import sys
import os
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> - <level>{level}</level> - "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} - {level} - {name} - {message}"


def configure_logger(level: str | None = None, log_file: str | None = None):
    """配置全局 loguru 日志输出（控制台 + 可选滚动文件）"""
    level = str(level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file if log_file is not None else os.getenv("LOG_FILE", "")

    # 清理已有 sink，重复调用时不会重复输出
    logger.remove()

    logger.add(sys.stdout, level=level, colorize=True, format=CONSOLE_FORMAT)

    if log_file:
        # 兼容 "xxx.log" 与不带后缀两种写法
        path = log_file if log_file.endswith(".log") else f"{log_file}.log"
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        logger.add(
            path,
            level=level,
            rotation="1 MB",
            retention=7,
            encoding="utf-8",
            format=FILE_FORMAT,
        )

    return logger


logger = configure_logger(log_file="")

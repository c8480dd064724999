import logging
import os
import sys
from typing import Optional

from .config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(level: int) -> list:
    """按 LOG_FORMAT 和 LOG_FILE 创建输出到 stdout（以及可选文件）的处理器"""
    formatter = logging.Formatter(JSON_FORMAT if settings.LOG_FORMAT == "json" else TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    获取配置好的日志记录器。

    重复调用会替换已有的处理器，--verbose 借此把 mdlingo 日志切到 DEBUG。
    无效的级别名按 INFO 处理。
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(log_level)
    for handler in _handlers(log_level):
        logger.addHandler(handler)

    # 不传播到根日志记录器，避免重复输出
    logger.propagate = False
    return logger


mdlingo_logger = get_logger("mdlingo")

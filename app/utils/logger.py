"""로깅 설정 모듈.

Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
Log lines go to stdout and, when LOG_FILE is set, to that file as well.
"""

import logging
import sys

from app.config import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """루트 로거를 한 번만 구성합니다 — Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if settings.LOG_FILE:
        file_handler = logging.FileHandler(settings.LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """이름이 지정된 로거를 반환합니다.

    Get a named logger instance.

    Args:
        name: 보통 호출 모듈의 ``__name__`` (Usually ``__name__`` of the calling module)

    Returns:
        logging.Logger: 구성된 로거 (A configured logger)
    """
    _init_logging()
    return logging.getLogger(name)

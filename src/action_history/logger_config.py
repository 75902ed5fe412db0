import logging
import os
from logging import StreamHandler
from logging.handlers import RotatingFileHandler

from appdirs import user_log_dir

APP_NAME = "action_history"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_log_file() -> str:
    log_dir = user_log_dir(APP_NAME)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, "action_history.log")


def setup_logger(level: int = logging.INFO) -> None:
    """Set up logging configuration."""

    logger = logging.getLogger()
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    # File handler
    file_handler = RotatingFileHandler(
        get_log_file(), maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Console handler
    stream_handler = StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

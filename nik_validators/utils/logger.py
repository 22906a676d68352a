"""
Logging setup

Console handler always, file handler only when a log file is configured
(NIK_LOG_FILE).
"""
import logging
from typing import Optional

from ..config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 level: Optional[str] = None) -> logging.Logger:
    """Configure and return a logger"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    config = Config()
    level = level or config.get_log_level()
    log_file = log_file or config.get_log_file()

    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # console
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger under the package logger

    Module names (nik_validators.xxx) already propagate to the package
    logger; any other name is attached as a child of it.
    """
    if name is None or name == logger.name:
        return logger
    if name.startswith(logger.name + '.'):
        return logging.getLogger(name)
    return logger.getChild(name)


def mask_number(number: str) -> str:
    """Mask an identity number for log output: 327301****01"""
    if len(number) <= 8:
        return '*' * len(number)
    return f"{number[:6]}****{number[-2:]}"


# default logger
logger = setup_logger('nik_validators')

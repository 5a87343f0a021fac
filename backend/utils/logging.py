"""
Logging setup shared by the CLI and the services.

Records are written as JSON lines to stderr so that stdout only carries the
activity feed.
"""

import logging
from typing import Optional, TextIO

from pythonjsonlogger import json

from utils.config import get_log_level

LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def setup_logger(stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger once per process.

    :param stream: Stream for the handler, stderr when omitted.
    :return: None
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(get_log_level())

    if root_logger.handlers:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(json.JsonFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the application.
    :param name: The name of the logger.
    :return: Logger object.
    """
    return logging.getLogger(name)

"""
Environment-driven settings for the activity CLI.
"""

import os

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_LOG_LEVEL = "WARNING"


def get_api_url() -> str:
    """
    Base URL of the GitHub REST API.

    :return: Value of GITHUB_API_URL without a trailing slash.
    """
    return os.environ.get("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/")


def get_log_level() -> str:
    """
    Root log level name taken from LOG_LEVEL.
    :return: Log level name.
    """
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)

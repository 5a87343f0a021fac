"""
Errors raised along the activity pipeline.

Every stage raises a subclass of ActivityError; none of them is retried or
downgraded, the CLI reports the message and exits.
"""

from typing import Optional


class ActivityError(Exception):
    """Base class for failures that end an activity run."""

    stage = "activity"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(ActivityError):
    """The command line is missing the username."""

    stage = "usage"


class TransportError(ActivityError):
    """The request could not be sent or the response body could not be read."""

    stage = "transport"


class ProtocolError(ActivityError):
    """
    The API answered with a status other than 200 OK.

    Attributes:
        status_code (int): Status code returned by the API.
    """

    stage = "protocol"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(
            message or f"Request failed with status code: {status_code}"
        )
        self.status_code = status_code


class FormatError(ActivityError):
    """The response body is not a JSON array of events."""

    stage = "format"

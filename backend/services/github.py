"""
Module for fetching a user's public events from the GitHub API.
"""

from typing import Optional

import httpx

import utils.logging
from app.exceptions import ProtocolError, TransportError
from utils.config import get_api_url

logger = utils.logging.get_logger(__name__)

EVENTS_PER_PAGE = 5
EVENTS_PAGE = 1


def build_events_url(username: str, base_url: Optional[str] = None) -> str:
    """
    Build the URL of the first page of a user's public events.

    The username is inserted as given, without validation.

    :param username: GitHub username.
    :param base_url: API base URL, taken from configuration when omitted.
    :return: Fully-qualified request URL.
    """
    base = (base_url or get_api_url()).rstrip("/")
    return (
        f"{base}/users/{username}/events"
        f"?per_page={EVENTS_PER_PAGE}&page={EVENTS_PAGE}"
    )


class GitHubService:
    """
    A class to fetch public activity from the GitHub API.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
    ):
        self.base_url = base_url or get_api_url()
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def __enter__(self) -> "GitHubService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the underlying client if this service created it.
        """
        if self._owns_client:
            self._client.close()

    def get(self, url: str) -> bytes:
        """
        Performs a single GET request and returns the raw body.
        :param url: Fully-qualified URL to request.

        :raise TransportError: The request could not be sent or read.
        :raise ProtocolError: The response status is not 200 OK.

        :return: Response body.
        """
        logger.debug(f"GET {url}")
        try:
            with self._client.stream("GET", url, headers=self.headers) as response:
                logger.debug(f"Response status {response.status_code} for {url}")
                if response.status_code != httpx.codes.OK:
                    raise ProtocolError(response.status_code)
                try:
                    return response.read()
                except httpx.HTTPError as exc:
                    raise TransportError(
                        f"Failed to read response body: {exc}"
                    ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Failed to make request: {exc}") from exc

    def fetch_events(self, username: str) -> bytes:
        """
        Retrieve the raw JSON body of a user's most recent public events.
        :param username: GitHub username of the user.
        :return: Undecoded response body.
        """
        return self.get(build_events_url(username, self.base_url))

"""
Event types reported by the GitHub events API and the message shown for each.

Classes:
    EventType (Enum): Enum for the event types the CLI knows how to describe.
"""

from enum import Enum
from typing import Optional


class EventType(Enum):
    """
    Enum representing the type tag of a GitHub event.

    Attributes:
        PUSH: Commits pushed to a branch.
        CREATE: Branch or tag created.
        DELETE: Branch or tag deleted.
        FORK: Repository forked.
        GOLLUM: Wiki page created or updated.
        ISSUE_COMMENT: Comment on an issue or pull request.
        ISSUES: Issue opened or closed.
        PULL_REQUEST: Pull request opened, closed or merged.
        WATCH: Repository starred.
        RELEASE: Release published.
    """

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    FORK = "ForkEvent"
    GOLLUM = "GollumEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    RELEASE = "ReleaseEvent"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["EventType"]:
        """
        Look up the member for a raw type tag.
        :param tag: The event's "type" field.
        :return: The matching member, or None for an unrecognised tag.
        """
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def template(self) -> str:
        """Message template, formatted with ``repo`` and ``size``."""
        return MESSAGE_TEMPLATES[self]


MESSAGE_TEMPLATES: dict[EventType, str] = {
    EventType.PUSH: "Pushed {size} commits to {repo}",
    EventType.CREATE: "A Git branch or tag is created: {repo}",
    EventType.DELETE: "A Git branch or tag is deleted: {repo}",
    EventType.FORK: "A user forks a repository: {repo}",
    EventType.GOLLUM: "A wiki page is created or updated: {repo}",
    EventType.ISSUE_COMMENT: (
        "Activity related to an issue or pull request comment in: {repo}"
    ),
    EventType.ISSUES: "An issue is opened or closed in: {repo}",
    EventType.PULL_REQUEST: "A pull request is opened, closed, or merged in: {repo}",
    EventType.WATCH: "A user starred a repository: {repo}",
    EventType.RELEASE: "A release is published in: {repo}",
}

UNKNOWN_EVENT_TEMPLATE = "Received an unknown event type: {type}"

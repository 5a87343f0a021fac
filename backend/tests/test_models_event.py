"""
Tests for the EventType enum and its message templates.

Covers:
- EventType enum values.
- Lookup from raw type tags.
- Template table coverage.
"""

from app.models import MESSAGE_TEMPLATES, UNKNOWN_EVENT_TEMPLATE, EventType


class TestEventTypeEnum:
    """Tests for the EventType enum."""

    def test_push_value(self):
        """EventType.PUSH has the API tag as its value."""
        assert EventType.PUSH.value == "PushEvent"

    def test_issue_comment_value(self):
        """EventType.ISSUE_COMMENT has the API tag as its value."""
        assert EventType.ISSUE_COMMENT.value == "IssueCommentEvent"

    def test_all_members(self):
        """EventType contains exactly the ten described types."""
        assert {member.value for member in EventType} == {
            "PushEvent",
            "CreateEvent",
            "DeleteEvent",
            "ForkEvent",
            "GollumEvent",
            "IssueCommentEvent",
            "IssuesEvent",
            "PullRequestEvent",
            "WatchEvent",
            "ReleaseEvent",
        }


class TestFromTag:
    """Tests for EventType.from_tag."""

    def test_known_tag(self):
        """Known tags map to their member."""
        assert EventType.from_tag("ReleaseEvent") is EventType.RELEASE

    def test_unknown_tag(self):
        """Unknown tags map to None."""
        assert EventType.from_tag("SponsorshipEvent") is None

    def test_lookup_is_case_sensitive(self):
        """Tags must match exactly."""
        assert EventType.from_tag("watchevent") is None

    def test_empty_tag(self):
        """An empty tag is unknown."""
        assert EventType.from_tag("") is None


class TestTemplates:
    """Tests for the message template table."""

    def test_every_member_has_template(self):
        """The table covers the whole enum."""
        assert set(MESSAGE_TEMPLATES) == set(EventType)

    def test_template_property(self):
        """EventType.template reads from the table."""
        assert EventType.WATCH.template == "A user starred a repository: {repo}"

    def test_only_push_uses_size(self):
        """Only the push template mentions the commit count."""
        assert [
            member for member, template in MESSAGE_TEMPLATES.items()
            if "{size}" in template
        ] == [EventType.PUSH]

    def test_unknown_template(self):
        """The fallback names the raw type."""
        assert UNKNOWN_EVENT_TEMPLATE.format(type="X") == (
            "Received an unknown event type: X"
        )

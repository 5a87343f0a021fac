"""
Decoding and rendering of a user's public activity.
"""

from collections.abc import Iterable

from pydantic import ValidationError

import utils.logging
from app.exceptions import FormatError
from app.models.event import UNKNOWN_EVENT_TEMPLATE, EventType
from app.schemas.event import Event, EventList

logger = utils.logging.get_logger(__name__)

NO_EVENTS_MESSAGE = "No events found."


def decode_events(raw: bytes) -> list[Event]:
    """
    Parse a response body into events, keeping the order of the source.
    :param raw: Body returned by the events endpoint.

    :raise FormatError: The body is not a JSON array of events.

    :return: Decoded events, possibly empty.
    """
    try:
        events = EventList.validate_json(raw)
    except ValidationError as exc:
        raise FormatError(f"Failed to parse JSON: {exc}") from exc
    logger.info(f"Decoded {len(events)} events")
    return events


def format_event(event: Event) -> str:
    """
    Describe one event in a single line.
    :param event: Decoded event.
    :return: Message without a trailing newline.
    """
    event_type = EventType.from_tag(event.type)
    if event_type is None:
        return UNKNOWN_EVENT_TEMPLATE.format(type=event.type)
    return event_type.template.format(repo=event.repo.name, size=event.payload.size)


def render_activity(events: Iterable[Event]) -> list[str]:
    """
    Render events as output lines, or a notice when there are none.
    """
    lines = [format_event(event) for event in events]
    return lines or [NO_EVENTS_MESSAGE]

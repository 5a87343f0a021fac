"""
Closed set of event types and their display templates.
"""

from .event import MESSAGE_TEMPLATES, UNKNOWN_EVENT_TEMPLATE, EventType

__all__ = ["EventType", "MESSAGE_TEMPLATES", "UNKNOWN_EVENT_TEMPLATE"]

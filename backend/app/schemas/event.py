"""
Pydantic schemas for events returned by the GitHub events API.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    TypeAdapter,
    field_validator,
)


class Repo(BaseModel):
    """
    Repository an event refers to.

    Attributes:
        name (str): Full name, e.g. "owner/repo".
        url (str): API URL of the repository.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""

    @field_validator("name", "url", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Payload(BaseModel):
    """
    Variant-specific event data. Only the push commit count is kept.

    Attributes:
        size (int): Number of commits in a push, zero for other events.
    """

    model_config = ConfigDict(frozen=True)

    size: StrictInt = 0

    @field_validator("size", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class Event(BaseModel):
    """
    Pydantic schema for one public activity record.

    Attributes:
        type (str): Event type tag, e.g. "PushEvent".
        repo (Repo): Repository the event happened in.
        payload (Payload): Variant-specific data.
        created_at (datetime): When the event happened, if reported.
    """

    model_config = ConfigDict(frozen=True)

    type: str = ""
    repo: Repo = Field(default_factory=Repo)
    payload: Payload = Field(default_factory=Payload)
    created_at: Optional[datetime] = None

    @field_validator("type", mode="before")
    @classmethod
    def _null_type(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("repo", "payload", mode="before")
    @classmethod
    def _null_to_empty_object(cls, value: Any) -> Any:
        return {} if value is None else value


EventList = TypeAdapter(list[Event])

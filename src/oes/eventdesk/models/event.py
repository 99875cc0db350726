"""Event models."""
from enum import Enum
from typing import Union

from attrs import field, frozen


class EventType(str, Enum):
    """The kind of event."""

    technical = "TECHNICAL"
    cultural = "CULTURAL"
    sports = "SPORTS"
    workshop = "WORKSHOP"


def parse_event_type(v: Union[EventType, str]) -> EventType:
    """Parse an :class:`EventType` from its value or member name.

    Raises:
        ValueError: If ``v`` names no event type.
    """
    if isinstance(v, EventType):
        return v
    elif not isinstance(v, str):
        raise ValueError(f"Invalid event type: {v!r}")

    try:
        return EventType(v.strip().upper())
    except ValueError:
        raise ValueError(f"Invalid event type: {v!r}") from None


@frozen(kw_only=True)
class Event:
    """Event class."""

    name: str
    """The event name."""

    type: EventType = field(converter=parse_event_type)
    """The event type."""

    participants: int
    """The initial participant count."""

    priority: int
    """The priority. Lower values are more urgent."""

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.type.value}, {self.participants} participants, "
            f"priority: {self.priority})"
        )


@frozen
class Registration:
    """A user's registration for an event."""

    user_id: str
    """The user ID."""

    event: str
    """The event name."""

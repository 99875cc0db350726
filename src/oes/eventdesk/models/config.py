"""Config models."""
from collections.abc import Sequence

from attrs import field, frozen, validators
from oes.eventdesk.models.event import Event, EventType, Registration


@frozen
class Config:
    """The main config class."""

    allowed_types: Sequence[EventType] = tuple(EventType)
    """The event types that may be created."""

    leaderboard_top: int = field(default=3, validator=validators.ge(1))
    """How many of the top participant counts to report."""

    probe_count: int = 150
    """The participant count looked up in the live registrations view."""

    events: Sequence[Event] = ()
    """Events to create at startup."""

    registrations: Sequence[Registration] = ()
    """Registrations to apply at startup, after the events."""

"""Event service."""
from __future__ import annotations

from bisect import bisect_left
from collections import OrderedDict
from collections.abc import Iterable, Sequence
from typing import Optional, Union

from loguru import logger
from oes.eventdesk.log import AuditLogType, audit_log
from oes.eventdesk.models.config import Config
from oes.eventdesk.models.event import (
    Event,
    EventType,
    Registration,
    parse_event_type,
)
from oes.eventdesk.models.report import (
    Leaderboard,
    LeaderboardEntry,
    LiveRegistrations,
)


class EventStoreError(ValueError):
    """Raised when a store operation cannot be performed."""

    pass


class DisallowedTypeError(EventStoreError):
    """Raised when creating an event of a type that is not allowed."""

    def __init__(self, type: Union[EventType, str]):
        name = type.value if isinstance(type, EventType) else type
        super().__init__(f"Event type {name} is not allowed.")
        self.type = type


class UnknownEventError(EventStoreError):
    """Raised when registering for an event that does not exist."""

    def __init__(self, event_name: str):
        super().__init__(f"Event '{event_name}' does not exist. Cannot register.")
        self.event_name = event_name


class NothingToUndoError(EventStoreError):
    """Raised when the action log is empty."""

    def __init__(self):
        super().__init__("No actions to undo.")


class EventStore:
    """In-memory store of events, registrations and admin actions.

    Args:
        allowed_types: The event types that may be created. Defaults to all types.
        leaderboard_top: How many of the top participant counts to report.
        probe_count: The count looked up in the live registrations view.
    """

    def __init__(
        self,
        allowed_types: Optional[Iterable[EventType]] = None,
        *,
        leaderboard_top: int = 3,
        probe_count: int = 150,
    ):
        if leaderboard_top < 1:
            raise ValueError("leaderboard_top must be at least 1")

        self.leaderboard_top = leaderboard_top
        self.probe_count = probe_count

        self._allowed_types: set[EventType] = set(
            EventType if allowed_types is None else allowed_types
        )
        self._events: list[Event] = []
        self._live: dict[str, int] = {}
        self._recent: OrderedDict[str, str] = OrderedDict()
        # one name per count, a later event replaces the earlier one
        self._leaderboard: dict[int, str] = {}
        self._actions: list[str] = []

    @classmethod
    def create(cls, config: Config) -> EventStore:
        """Create a store from a :class:`Config`, applying its seed data.

        Seed events and registrations that fail are logged and skipped.
        """
        store = cls(
            config.allowed_types,
            leaderboard_top=config.leaderboard_top,
            probe_count=config.probe_count,
        )

        for event in config.events:
            try:
                store.create_event(
                    event.name, event.type, event.participants, event.priority
                )
            except EventStoreError as e:
                logger.warning(f"Skipping event {event.name!r}: {e}")

        for registration in config.registrations:
            try:
                store.register_user(registration.user_id, registration.event)
            except EventStoreError as e:
                logger.warning(
                    f"Skipping registration for {registration.user_id!r}: {e}"
                )

        return store

    @property
    def events(self) -> Sequence[Event]:
        """All events in creation order."""
        return tuple(self._events)

    @property
    def actions(self) -> Sequence[str]:
        """The admin action log, oldest first."""
        return tuple(self._actions)

    @property
    def allowed_types(self) -> frozenset[EventType]:
        """The event types that may be created."""
        return frozenset(self._allowed_types)

    def allow_type(self, type: EventType):
        """Add ``type`` to the allowed event types."""
        self._allowed_types.add(type)

    def disallow_type(self, type: EventType):
        """Remove ``type`` from the allowed event types."""
        self._allowed_types.discard(type)

    def get_event(self, name: str) -> Optional[Event]:
        """Get the most recently created event named ``name``."""
        for event in reversed(self._events):
            if event.name == name:
                return event
        return None

    def get_count(self, name: str) -> Optional[int]:
        """Get the current participant count of an event."""
        return self._live.get(name)

    def create_event(
        self,
        name: str,
        type: Union[EventType, str],
        participants: int,
        priority: int,
    ) -> Event:
        """Create an event.

        Args:
            name: The event name.
            type: The event type, or its name.
            participants: The initial participant count.
            priority: The priority, lower is more urgent.

        Returns:
            The new :class:`Event`.

        Raises:
            DisallowedTypeError: If ``type`` is unknown or not allowed.
        """
        try:
            type = parse_event_type(type)
        except ValueError:
            raise DisallowedTypeError(type) from None

        if type not in self._allowed_types:
            raise DisallowedTypeError(type)

        event = Event(
            name=name, type=type, participants=participants, priority=priority
        )
        self._events.append(event)
        self._leaderboard[participants] = name
        self._live[name] = participants
        self._actions.append(f"Created: {name}")

        audit_log.bind(type=AuditLogType.event_create, event=name).success(
            "Event created: {event}", event=event
        )
        return event

    def register_user(self, user_id: str, event_name: str) -> int:
        """Register a user for an event.

        A user may register any number of times, each registration increments
        the count.

        Returns:
            The new participant count.

        Raises:
            UnknownEventError: If the event does not exist.
        """
        if event_name not in self._live:
            raise UnknownEventError(event_name)

        self._recent[user_id] = event_name
        self._recent.move_to_end(user_id)
        self._live[event_name] += 1
        self._actions.append(f"Registered: {user_id} for {event_name}")

        audit_log.bind(
            type=AuditLogType.event_register, event=event_name, user_id=user_id
        ).success("{user_id} registered for {event}", user_id=user_id, event=event_name)
        return self._live[event_name]

    def show_leaderboard(self) -> Leaderboard:
        """Get the events ordered by initial participant count."""
        entries = tuple(
            LeaderboardEntry(name, count)
            for count, name in sorted(self._leaderboard.items(), reverse=True)
        )

        if len(entries) >= self.leaderboard_top:
            top_counts = tuple(e.participants for e in entries[: self.leaderboard_top])
        else:
            top_counts = ()

        logger.debug(f"Leaderboard has {len(entries)} entries")
        return Leaderboard(entries, top_counts)

    def show_live_registrations(self) -> LiveRegistrations:
        """Get the current participant counts."""
        sorted_counts = tuple(sorted(self._live.values()))
        index = bisect_left(sorted_counts, self.probe_count)
        found = index < len(sorted_counts) and sorted_counts[index] == self.probe_count

        return LiveRegistrations(
            counts=dict(self._live),
            sorted_counts=sorted_counts,
            probe=self.probe_count,
            probe_index=index if found else None,
        )

    def recent_registrations(self) -> Sequence[Registration]:
        """Get the recent registrations, least recent first."""
        return tuple(
            Registration(user_id, event) for user_id, event in self._recent.items()
        )

    def events_by_priority(self) -> Sequence[Event]:
        """Get all events ordered by priority.

        Events with equal priority keep their creation order.
        """
        return tuple(sorted(self._events, key=lambda e: e.priority))

    def undo_last_action(self) -> str:
        """Remove and return the most recent admin action.

        Only the log entry is removed, the action's effects remain.

        Raises:
            NothingToUndoError: If there are no actions.
        """
        if not self._actions:
            raise NothingToUndoError

        action = self._actions.pop()
        audit_log.bind(type=AuditLogType.action_undo).success(
            "Undo: {action}", action=action
        )
        return action

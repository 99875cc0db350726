"""Report models returned by the store views."""
from collections.abc import Mapping, Sequence
from typing import Optional

from attrs import frozen


@frozen
class LeaderboardEntry:
    """A leaderboard slot."""

    name: str
    participants: int


@frozen
class Leaderboard:
    """Events ordered by initial participant count, descending."""

    entries: Sequence[LeaderboardEntry] = ()
    """The entries, highest count first."""

    top_counts: Sequence[int] = ()
    """The top participant counts, or empty if there are too few entries."""


@frozen(kw_only=True)
class LiveRegistrations:
    """Snapshot of the current registration counts."""

    counts: Mapping[str, int]
    """Event name to current participant count."""

    sorted_counts: Sequence[int] = ()
    """All current counts in ascending order."""

    probe: int
    """The value looked up in :attr:`sorted_counts`."""

    probe_index: Optional[int] = None
    """The position of :attr:`probe`, or ``None`` if it is absent."""

"""Text menu."""
import re
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from oes.eventdesk.models.event import parse_event_type
from oes.eventdesk.services.event import (
    EventStore,
    EventStoreError,
    NothingToUndoError,
)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

MENU = """
--- Event Management System Menu ---
1. Register for an Event
2. Show Event Leaderboard (by initial participants)
3. Show Live Registration Counts
4. Print Recent Registrations
5. Show Events by Priority
6. Undo Last Admin Action
7. Create an Event
0. Exit"""


def parse_int(v: str) -> int:
    """Parse a plain decimal integer, without whitespace or underscores."""
    if not INTEGER_PATTERN.fullmatch(v):
        raise ValueError(f"Invalid integer: {v!r}")
    return int(v)


class Console:
    """Line-based input and output for the menu."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
        self.stdin = stdin
        self.stdout = stdout

    def print(self, *args: object):
        print(*args, file=self.stdout)

    def prompt(self, text: str) -> Optional[str]:
        """Print ``text`` and read a line, or ``None`` at end of input."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


def register(store: EventStore, console: Console):
    user_id = console.prompt("Enter User ID: ")
    if user_id is None:
        return
    event_name = console.prompt("Enter Event Name: ")
    if event_name is None:
        return

    try:
        store.register_user(user_id, event_name)
    except EventStoreError as e:
        console.print(f"Error: {e}")


def show_leaderboard(store: EventStore, console: Console):
    console.print("\n--- Event Leaderboard (by initial participants) ---")
    leaderboard = store.show_leaderboard()
    if not leaderboard.entries:
        console.print("No events on the leaderboard yet.")
        return

    for entry in leaderboard.entries:
        console.print(f"{entry.name}: {entry.participants} initial participants")

    if leaderboard.top_counts:
        counts = ", ".join(str(c) for c in leaderboard.top_counts)
        console.print(
            f"Top {len(leaderboard.top_counts)} participant counts: {counts}"
        )


def show_live_registrations(store: EventStore, console: Console):
    console.print("\n--- Live Registration Counts ---")
    live = store.show_live_registrations()
    if not live.counts:
        console.print("No live registration data yet.")
        return

    for name, count in live.counts.items():
        console.print(f"{name}: {count} current participants")

    console.print(f"Sorted counts: {', '.join(str(c) for c in live.sorted_counts)}")
    if live.probe_index is not None:
        console.print(f"Count {live.probe} found at position {live.probe_index}")
    else:
        console.print(f"Count {live.probe} not found")


def print_recent_registrations(store: EventStore, console: Console):
    console.print("\n--- Recent Registrations (LRU Style) ---")
    recent = store.recent_registrations()
    if not recent:
        console.print("No recent registrations yet.")
        return

    for registration in recent:
        console.print(f"{registration.user_id} -> {registration.event}")


def show_events_by_priority(store: EventStore, console: Console):
    console.print("\n--- Events by Priority (Next to Process) ---")
    events = store.events_by_priority()
    if not events:
        console.print("No events in the queue.")
        return

    for event in events:
        console.print(f"Priority {event.priority}: {event.name}")


def undo_last_action(store: EventStore, console: Console):
    try:
        action = store.undo_last_action()
    except NothingToUndoError as e:
        console.print(e)
    else:
        console.print(f"Undo: {action}")


def create_event(store: EventStore, console: Console):
    values = []
    for text in (
        "Enter Event Name: ",
        "Enter Event Type (TECHNICAL, CULTURAL, SPORTS, WORKSHOP): ",
        "Enter Initial Participants: ",
        "Enter Priority: ",
    ):
        value = console.prompt(text)
        if value is None:
            return
        values.append(value)

    name, type_str, participants_str, priority_str = values
    try:
        type_ = parse_event_type(type_str)
        participants = parse_int(participants_str)
        priority = parse_int(priority_str)
    except ValueError:
        console.print("Invalid input. Please enter a valid type and numbers.")
        return

    try:
        store.create_event(name, type_, participants, priority)
    except EventStoreError as e:
        console.print(f"Error: {e}")


Action = Callable[[EventStore, Console], None]

ACTIONS: dict[int, Action] = {
    1: register,
    2: show_leaderboard,
    3: show_live_registrations,
    4: print_recent_registrations,
    5: show_events_by_priority,
    6: undo_last_action,
    7: create_event,
}


def run_menu(store: EventStore, console: Optional[Console] = None):
    """Run the menu until the user exits or the input ends."""
    console = console or Console()

    while True:
        console.print(MENU)
        line = console.prompt("Enter your choice: ")
        if line is None:
            return

        try:
            choice = parse_int(line)
        except ValueError:
            console.print("Invalid input. Please enter a number.")
            continue

        if choice == 0:
            console.print("Exiting Event Management System. Goodbye!")
            return

        action = ACTIONS.get(choice)
        if action is None:
            console.print("Invalid choice. Please try again.")
        else:
            action(store, console)

import pytest
from oes.eventdesk.models.event import Event, EventType, parse_event_type


def test_event_str():
    event = Event(
        name="Hackathon", type=EventType.technical, participants=120, priority=1
    )
    assert str(event) == "Hackathon (TECHNICAL, 120 participants, priority: 1)"


def test_event_accepts_negative_values():
    event = Event(name="Odd", type=EventType.sports, participants=-5, priority=-1)
    assert event.participants == -5
    assert event.priority == -1


@pytest.mark.parametrize(
    "input_, expected",
    [
        ("TECHNICAL", EventType.technical),
        ("cultural", EventType.cultural),
        (" Sports ", EventType.sports),
        ("WORKSHOP", EventType.workshop),
    ],
)
def test_parse_event_type(input_, expected):
    assert parse_event_type(input_) == expected


@pytest.mark.parametrize("input_", ["", "party", "TECH"])
def test_parse_event_type_invalid(input_):
    with pytest.raises(ValueError):
        parse_event_type(input_)


def test_event_type_from_name():
    event = Event(name="Tag", type="sports", participants=4, priority=2)
    assert event.type is EventType.sports


def test_event_type_invalid():
    with pytest.raises(ValueError):
        Event(name="Tag", type="party", participants=4, priority=2)


@pytest.mark.parametrize("input_", [None, 3])
def test_parse_event_type_not_a_string(input_):
    with pytest.raises(ValueError):
        parse_event_type(input_)

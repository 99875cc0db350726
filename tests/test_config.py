from pathlib import Path

import pytest
from cattrs import BaseValidationError
from oes.eventdesk.config import get_config, load_config
from oes.eventdesk.models.config import Config
from oes.eventdesk.models.event import Event, EventType, Registration


def test_load_config(example_config: Config):
    assert example_config.allowed_types == (EventType.technical, EventType.sports)
    assert example_config.leaderboard_top == 2
    assert example_config.probe_count == 121
    assert example_config.events[0] == Event(
        name="Hackathon", type=EventType.technical, participants=120, priority=1
    )
    assert example_config.events[2].type == EventType.sports
    assert example_config.registrations == (
        Registration("u101", "Hackathon"),
        Registration("u102", "Dance Battle"),
    )


def test_load_empty_config(tmp_path: Path):
    path = tmp_path / "config.yml"
    path.write_text("")
    assert load_config(path) == Config()


def test_get_config_missing(tmp_path: Path):
    assert get_config(tmp_path / "missing.yml") == Config()


def test_get_config(tmp_path: Path):
    path = tmp_path / "config.yml"
    path.write_text("probe_count: 5\n")
    assert get_config(path).probe_count == 5


def test_default_config_file():
    config = load_config(Path(__file__).parent.parent / "config.yml")
    assert [e.name for e in config.events] == [
        "Hackathon",
        "Dance Battle",
        "Code Golf",
        "Football Tournament",
    ]
    assert len(config.registrations) == 3


@pytest.mark.parametrize("top", [0, -2])
def test_invalid_leaderboard_top(tmp_path: Path, top: int):
    path = tmp_path / "config.yml"
    path.write_text(f"leaderboard_top: {top}\n")

    with pytest.raises((BaseValidationError, ValueError)):
        load_config(path)


def test_config_leaderboard_top_validator():
    with pytest.raises(ValueError):
        Config(leaderboard_top=0)
    assert Config(leaderboard_top=1).leaderboard_top == 1

from pathlib import Path

import pytest
from loguru import logger
from oes.eventdesk.config import load_config
from oes.eventdesk.log import audit_log
from oes.eventdesk.models.config import Config
from oes.eventdesk.models.event import EventType
from oes.eventdesk.services.event import EventStore

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    audit_log.remove()


@pytest.fixture
def example_config() -> Config:
    return load_config(TEST_DATA / "config.yml")


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def example_store(store: EventStore) -> EventStore:
    store.create_event("Hackathon", EventType.technical, 120, 1)
    store.create_event("Code Golf", EventType.technical, 150, 2)
    store.register_user("u101", "Hackathon")
    return store

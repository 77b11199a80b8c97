import os

import pytest

# Test layer, keyed by the directory a test module lives in
_LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "integration": pytest.mark.integration,
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="PROTEAN_ENV overlay from domain.toml to run the tests against",
    )


def pytest_sessionstart(session):
    """Initialize the oms domain once, before collection.

    The domain context stays pushed for the whole session so tests and
    fixtures can use ``current_domain`` directly.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from oms.domain import oms

    oms.init()
    oms.domain_context().push()


def pytest_collection_modifyitems(config, items):
    for item in items:
        for part in item.path.parent.parts:
            marker = _LAYER_MARKERS.get(part)
            if marker is None:
                continue
            item.add_marker(marker)
            if part == "integration" and item.get_closest_marker("fast") is None:
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def database_schema():
    from oms.domain import oms
    from oms.utils.db import drop_db, setup_db

    setup_db(oms)
    yield
    drop_db(oms)


@pytest.fixture(autouse=True)
def clean_infrastructure():
    """Wipe stored data, broker messages and the event store after every test."""
    yield

    from protean import current_domain

    for provider in current_domain.providers.values():
        provider._data_reset()
    for broker in current_domain.brokers.values():
        broker._data_reset()
    current_domain.event_store.store._data_reset()

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the ledger domain once; each test then runs inside its own
    pushed domain context (see `run_around_tests`).
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from ledger.domain import ledger

    ledger.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the ledger domain context for every test and wipe the ledger afterwards."""
    from ledger.domain import ledger

    with ledger.domain_context():
        yield

        for _, provider in ledger.providers.items():
            provider._data_reset()

        ledger.event_store.store._data_reset()


@pytest.fixture()
def ledger_client():
    from ledger.client import LedgerClient

    return LedgerClient()

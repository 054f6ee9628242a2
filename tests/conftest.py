import os
import tempfile
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

    Pins the environment to the in-memory store and configures logging once,
    before any module-level logger is first used.
    """
    os.environ["ENVIRONMENT"] = session.config.option.env
    os.environ["STOCKROOM_STORE"] = "memory"
    os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "stockroom-test-logs"))

    from stockroom.utils.logging import configure_logging

    configure_logging()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(item.path)

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically reset the store and service singletons around every test"""
    from stockroom.domain import reset_product_service
    from stockroom.store import reset_store

    reset_store()
    reset_product_service()

    yield

    reset_store()
    reset_product_service()

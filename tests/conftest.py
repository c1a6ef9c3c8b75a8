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

    Select the Protean config overlay and keep adapters in their test doubles
    so no test ever reaches a real endpoint by accident.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("WEBHOOK_TRANSPORT", "fake")
    os.environ.setdefault("WEBHOOK_CONFIG_SOURCE", "memory")


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
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to reset adapter singletons after every test"""
    yield

    from shipping_webhook.config import reset_config_reader
    from shipping_webhook.transport import reset_transport

    reset_config_reader()
    reset_transport()

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
    """Select the config overlay before any test module imports the shop domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("LOG_TO_FILE", "false")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

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


@pytest.fixture(scope="session")
def _shop_domain():
    """Initialize the shop domain once per session."""
    from shop.domain import shop

    shop.init()
    return shop


@pytest.fixture(scope="session", autouse=True)
def setup_db(_shop_domain):
    from shop.utils.db import drop_db, setup_db

    setup_db(_shop_domain)

    yield

    drop_db(_shop_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_shop_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _shop_domain.domain_context()
    ctx.push()

    yield

    from shop.utils.db import reset_data

    reset_data(_shop_domain)
    ctx.pop()

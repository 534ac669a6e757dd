"""
Pytest configuration and shared fixtures.
"""

from typing import List
from unittest.mock import MagicMock

import pytest

from basics.app.state import Store, ViewState, greeting_names
from basics.shared.core import configuration
from basics.shared.core.event_bus import EventBus


@pytest.fixture(autouse=True)
def reset_globals():
    """Every test starts without a Store or cached config manager."""
    Store.reset()
    configuration._config_manager = None
    yield
    Store.reset()
    configuration._config_manager = None


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def view(bus: EventBus) -> ViewState:
    """A session over the default 1000 rows."""
    return ViewState(bus, greeting_names())


@pytest.fixture
def recorded(view: ViewState) -> List[dict]:
    """Payloads delivered to a subscriber of ``view``."""
    payloads: List[dict] = []
    view.subscribe(payloads.append)
    return payloads


@pytest.fixture
def page() -> MagicMock:
    return MagicMock(name="page")

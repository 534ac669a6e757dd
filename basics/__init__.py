"""Basics Codelab package."""

from .shared.core.event_bus import EventBus
from .app.state import Store, ViewState

__all__ = ["EventBus", "Store", "ViewState"]

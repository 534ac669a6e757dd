"""Global State Store - Service Locator Pattern.

Provides centralized access to the view state from any UI component.
Implements the singleton pattern for consistent state access.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .view_state import ViewState
from basics.shared.core.event_bus import EventBus


class Store:
    """Global state store for the codelab application.

    Usage:
        # During app initialization
        Store.initialize(event_bus, greeting_names())

        # In any UI component
        store = Store.get()
        store.view.continue_onboarding()
    """

    _instance: Optional['Store'] = None

    def __init__(self, event_bus: EventBus, row_ids: Iterable[str]) -> None:
        """Initialize store with event bus.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            event_bus: The shared event bus instance
            row_ids: Ordered greeting row identifiers
        """
        self.bus = event_bus
        self.view = ViewState(event_bus, row_ids)

    @classmethod
    def initialize(cls, event_bus: EventBus, row_ids: Iterable[str]) -> 'Store':
        """Initialize the global store instance.

        Should be called once during application startup before any UI
        components are created.

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(event_bus, row_ids)
        return cls._instance

    @classmethod
    def create_session(cls, event_bus: EventBus, row_ids: Iterable[str]) -> 'Store':
        """Create a store owned by a single page, outside the global slot.

        Web mode serves many pages from one process; each gets its own
        session with onboarding shown and every row collapsed.
        """
        return cls(event_bus, row_ids)

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the store instance.

        Used by tests and by session restarts; the next initialize() starts
        a fresh session with onboarding shown and every row collapsed.
        """
        cls._instance = None

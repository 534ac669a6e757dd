"""View State for the onboarding gate and the greetings list.

Holds the two independent pieces of ephemeral UI state:

- a single ``show_onboarding`` flag deciding which screen is presented
- one ``expanded`` flag per greeting row, keyed by row id

Mutations go through ``continue_onboarding`` and ``toggle_expanded`` only.
Every applied mutation is published on the EventBus after the state has
changed, so subscribers always read the latest values.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from basics.shared.core import events
from basics.shared.core.event_bus import EventBus, EventHandler

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    """The two mutually exclusive screens."""
    ONBOARDING = "onboarding"
    GREETINGS = "greetings"


@dataclass(frozen=True)
class GreetingRow:
    """Read-only view of one greeting row."""
    row_id: str
    expanded: bool = False


class ViewSnapshot(BaseModel):
    """Serializable copy of the view state, used to survive window recreation."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    show_onboarding: bool = Field(default=True, description="Onboarding screen still presented")
    expanded: List[str] = Field(default_factory=list, description="Ids of expanded rows, in row order")


def initial_state(row_ids: Iterable[str]) -> Dict[str, Any]:
    """Return the state of a fresh session for the given rows."""
    return {
        "show_onboarding": True,
        "rows": {row_id: False for row_id in row_ids},
    }


class ViewState:
    """State controller for the onboarding screen and the greeting rows.

    Usage:
        view = ViewState(event_bus, greeting_names())
        unsubscribe = view.subscribe(redraw)
        view.toggle_expanded("3")
        view.continue_onboarding()
    """

    def __init__(self, event_bus: EventBus, row_ids: Iterable[str]) -> None:
        """Initialize a fresh session.

        Args:
            event_bus: Bus used to notify subscribers of applied mutations
            row_ids: Ordered, unique row identifiers from the row data source

        Raises:
            ValueError: If a row id appears more than once
        """
        self.bus = event_bus
        self._row_ids: Tuple[str, ...] = tuple(row_ids)
        self._show_onboarding = True
        self._expanded: Dict[str, bool] = dict.fromkeys(self._row_ids, False)

        if len(self._expanded) != len(self._row_ids):
            raise ValueError("Greeting row ids must be unique")

    @classmethod
    def initial(cls, event_bus: EventBus, row_ids: Iterable[str]) -> "ViewState":
        return cls(event_bus, row_ids)

    # --- Reads ---

    @property
    def show_onboarding(self) -> bool:
        return self._show_onboarding

    @property
    def screen(self) -> Screen:
        return Screen.ONBOARDING if self._show_onboarding else Screen.GREETINGS

    @property
    def row_ids(self) -> Tuple[str, ...]:
        return self._row_ids

    @property
    def rows(self) -> List[GreetingRow]:
        return [GreetingRow(row_id, self._expanded[row_id]) for row_id in self._row_ids]

    @property
    def expanded_rows(self) -> List[str]:
        return [row_id for row_id in self._row_ids if self._expanded[row_id]]

    def is_expanded(self, row_id: str) -> bool:
        """Return whether a row is expanded.

        Raises:
            KeyError: If the row id is not part of this session
        """
        return self._expanded[self._require_row(row_id)]

    def as_dict(self) -> Dict[str, Any]:
        """Return the current state in the same shape as ``initial_state``."""
        return {
            "show_onboarding": self._show_onboarding,
            "rows": dict(self._expanded),
        }

    # --- Subscriptions ---

    def subscribe(self, listener: EventHandler) -> Callable[[], None]:
        """Register a listener called after every applied mutation.

        Args:
            listener: Called with the change payload (see ``events``)

        Returns:
            A callable that removes the listener
        """
        self.bus.subscribe(events.TOPIC_VIEW_CHANGED, listener)

        def unsubscribe() -> None:
            self.bus.unsubscribe(events.TOPIC_VIEW_CHANGED, listener)

        return unsubscribe

    # --- Public Actions ---

    def continue_onboarding(self) -> None:
        """Leave the onboarding screen for the greetings list.

        Calling it again once the list is shown changes nothing.
        """
        if not self._show_onboarding:
            logger.debug("continue_onboarding ignored: onboarding already dismissed")
            return

        self._show_onboarding = False
        logger.info("Onboarding dismissed, presenting greetings")
        self._publish(
            events.TOPIC_SCREEN_CHANGED,
            events.create_screen_changed_event(self.screen.value),
        )

    def toggle_expanded(self, row_id: str) -> bool:
        """Flip one row between collapsed and expanded.

        Args:
            row_id: Row to toggle

        Returns:
            The row's new ``expanded`` value

        Raises:
            KeyError: If the row id is not part of this session
        """
        row_id = self._require_row(row_id)
        expanded = not self._expanded[row_id]
        self._expanded[row_id] = expanded
        logger.debug(f"Row {row_id!r} {'expanded' if expanded else 'collapsed'}")
        self._publish(
            events.TOPIC_ROW_TOGGLED,
            events.create_row_toggled_event(row_id, expanded),
        )
        return expanded

    # --- Saved instance state ---

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(show_onboarding=self._show_onboarding, expanded=self.expanded_rows)

    def restore(self, snapshot: Union[ViewSnapshot, Mapping[str, Any]]) -> None:
        """Apply a previously captured snapshot.

        The onboarding flag only ever moves from shown to dismissed, so a
        snapshot taken before ``continue_onboarding`` does not bring the
        onboarding screen back.

        Args:
            snapshot: A ViewSnapshot or its ``model_dump()`` form

        Raises:
            pydantic.ValidationError: If a mapping does not describe a snapshot
            ValueError: If the snapshot names rows this session does not have
        """
        if not isinstance(snapshot, ViewSnapshot):
            snapshot = ViewSnapshot.model_validate(snapshot)

        unknown = [row_id for row_id in snapshot.expanded if row_id not in self._expanded]
        if unknown:
            raise ValueError(f"Snapshot references unknown greeting rows: {unknown[:5]}")

        wanted = set(snapshot.expanded)
        self._show_onboarding = self._show_onboarding and snapshot.show_onboarding
        for row_id in self._row_ids:
            self._expanded[row_id] = row_id in wanted

        logger.info(f"View state restored: screen={self.screen.value}, expanded={len(wanted)} row(s)")
        self._publish(
            events.TOPIC_VIEW_RESTORED,
            events.create_view_restored_event(self.screen.value, self.expanded_rows),
        )

    # --- Internals ---

    def _require_row(self, row_id: str) -> str:
        if row_id not in self._expanded:
            raise KeyError(f"Unknown greeting row: {row_id!r}")
        return row_id

    def _publish(self, topic: str, payload: Dict[str, Any]) -> None:
        self.bus.publish(topic, payload)
        self.bus.publish(events.TOPIC_VIEW_CHANGED, copy.deepcopy(payload))

"""Canonical event definitions for the view state."""

from __future__ import annotations

from typing import Iterable, Literal

from .event_bus import EventPayload

# Event Topics
TOPIC_VIEW_CHANGED = "view.changed"  # Every applied mutation
TOPIC_SCREEN_CHANGED = "view.screen_changed"
TOPIC_ROW_TOGGLED = "view.row_toggled"
TOPIC_VIEW_RESTORED = "view.restored"

# Values carried in the "kind" field of TOPIC_VIEW_CHANGED payloads
KIND_SCREEN = "screen"
KIND_ROW = "row"
KIND_RESTORE = "restore"

ScreenName = Literal["onboarding", "greetings"]


def create_screen_changed_event(screen: ScreenName) -> EventPayload:
    """Create a screen changed event (onboarding dismissed)."""
    return {
        "kind": KIND_SCREEN,
        "screen": screen,
    }


def create_row_toggled_event(row_id: str, expanded: bool) -> EventPayload:
    """Create a row toggled event."""
    return {
        "kind": KIND_ROW,
        "row_id": row_id,
        "expanded": expanded,
    }


def create_view_restored_event(screen: ScreenName, expanded: Iterable[str]) -> EventPayload:
    """Create a view restored event.

    Args:
        screen: Screen presented after the restore
        expanded: Ids of the rows that are expanded after the restore
    """
    return {
        "kind": KIND_RESTORE,
        "screen": screen,
        "expanded": list(expanded),
    }

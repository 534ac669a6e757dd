from __future__ import annotations

import logging
from typing import Callable, Optional

import flet as ft

from basics.app.state import Store
from basics.app.state.view_state import GreetingRow, Screen, ViewState
from basics.app.ui.screens.greetings import GreetingsList
from basics.app.ui.screens.onboarding import build_onboarding_screen
from basics.shared.core import events
from basics.shared.core.event_bus import EventPayload

logger = logging.getLogger(__name__)


class Surface:
    """Root container presenting exactly one screen of a ViewState.

    Subscribes once to the view state: a screen change or restore swaps the
    whole screen, a row toggle redraws only that row's card.
    """

    def __init__(self, page: ft.Page, view: ViewState) -> None:
        self.page = page
        self.view = view
        self.greetings: Optional[GreetingsList] = None
        self.container = ft.Container(expand=True, content=self._build_screen())
        self._unsubscribe: Optional[Callable[[], None]] = view.subscribe(self._on_view_changed)

    @property
    def subscribed(self) -> bool:
        return self._unsubscribe is not None

    def close(self) -> None:
        """Stop listening to the view state."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _build_screen(self) -> ft.Control:
        if self.view.screen is Screen.ONBOARDING:
            self.greetings = None
            return build_onboarding_screen(on_continue_clicked=self.view.continue_onboarding)

        self.greetings = GreetingsList(self.view.rows, on_toggle=self.view.toggle_expanded)
        return self.greetings.control

    def _on_view_changed(self, payload: EventPayload) -> None:
        kind = payload.get("kind")
        if kind == events.KIND_ROW:
            if self.greetings is None:
                # List not on screen; it is built from current state when shown
                return
            row_id = payload["row_id"]
            self.greetings.redraw_row(GreetingRow(row_id, self.view.is_expanded(row_id)))
        else:
            self.container.content = self._build_screen()
        self._refresh()

    def _refresh(self) -> None:
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, nothing left to draw into
            logger.debug("Page session gone, detaching surface")
            self.close()


def build_shell(page: ft.Page, store: Store) -> ft.View:
    surface = Surface(page, store.view)

    def _on_disconnect(e=None) -> None:
        logger.debug("Page disconnected, detaching surface")
        surface.close()

    page.on_disconnect = _on_disconnect
    return ft.View(
        route="/",
        controls=[surface.container],
        padding=0,
    )

"""Greetings list: one expandable card per greeting row."""

from __future__ import annotations

from typing import Callable, Dict, Iterable

import flet as ft

from basics.app.state.view_state import GreetingRow
from basics.app.ui import strings
from basics.app.ui.theme import (
    CARD_BG, CARD_TEXT, CARD_RADIUS, CARD_CONTENT_PADDING,
    CARD_MARGIN_HORIZONTAL, CARD_MARGIN_VERTICAL, LIST_PADDING_VERTICAL,
)

ToggleHandler = Callable[[str], object]


def expand_icon(expanded: bool):
    return ft.Icons.EXPAND_LESS if expanded else ft.Icons.EXPAND_MORE


def expand_tooltip(expanded: bool) -> str:
    return strings.SHOW_LESS if expanded else strings.SHOW_MORE


def build_greeting_card(row: GreetingRow, on_toggle: ToggleHandler) -> ft.Container:
    """Build the card for one row in its current expansion state.

    Args:
        row: Row to render
        on_toggle: Called with the row id when the expand icon is pressed
    """

    def _on_click(e=None) -> None:
        on_toggle(row.row_id)

    texts: list[ft.Control] = [
        ft.Text(strings.GREETING_PREFIX, color=CARD_TEXT),
        ft.Text(
            row.row_id,
            color=CARD_TEXT,
            theme_style=ft.TextThemeStyle.HEADLINE_MEDIUM,
            weight=ft.FontWeight.W_800,
        ),
    ]
    if row.expanded:
        texts.append(ft.Text(strings.GREETING_DETAIL, color=CARD_TEXT))

    return ft.Container(
        key=row.row_id,
        bgcolor=CARD_BG,
        border_radius=CARD_RADIUS,
        margin=ft.Margin(
            left=CARD_MARGIN_HORIZONTAL,
            right=CARD_MARGIN_HORIZONTAL,
            top=CARD_MARGIN_VERTICAL,
            bottom=CARD_MARGIN_VERTICAL,
        ),
        padding=CARD_CONTENT_PADDING,
        content=ft.Row(
            [
                ft.Container(
                    expand=True,
                    padding=CARD_CONTENT_PADDING,
                    content=ft.Column(texts, spacing=4),
                ),
                ft.IconButton(
                    icon=expand_icon(row.expanded),
                    icon_color=CARD_TEXT,
                    tooltip=expand_tooltip(row.expanded),
                    on_click=_on_click,
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.START,
        ),
    )


class GreetingsList:
    """Scrollable list of greeting cards that can redraw a single row."""

    def __init__(self, rows: Iterable[GreetingRow], on_toggle: ToggleHandler) -> None:
        self._on_toggle = on_toggle
        rows = list(rows)
        self._index: Dict[str, int] = {row.row_id: i for i, row in enumerate(rows)}
        self.control = ft.ListView(
            controls=[build_greeting_card(row, on_toggle) for row in rows],
            padding=ft.Padding(left=0, right=0, top=LIST_PADDING_VERTICAL, bottom=LIST_PADDING_VERTICAL),
            expand=True,
        )

    def __len__(self) -> int:
        return len(self._index)

    def card(self, row_id: str) -> ft.Container:
        return self.control.controls[self._index[row_id]]

    def redraw_row(self, row: GreetingRow) -> None:
        """Replace one card; the rest of the list is left untouched."""
        self.control.controls[self._index[row.row_id]] = build_greeting_card(row, self._on_toggle)

from __future__ import annotations

from typing import Callable

import flet as ft

from basics.app.ui import strings
from basics.app.ui.theme import BUTTON_PADDING_VERTICAL, TEXT_WELCOME


def build_onboarding_screen(on_continue_clicked: Callable[[], None]) -> ft.Control:
    """Centered welcome message with a "Continue" button.

    Args:
        on_continue_clicked: Called when the button is pressed
    """

    def _on_click(e=None) -> None:
        on_continue_clicked()

    continue_button = ft.FilledButton(
        strings.CONTINUE,
        on_click=_on_click,
    )

    return ft.Container(
        expand=True,
        content=ft.Column(
            [
                ft.Text(strings.WELCOME, color=TEXT_WELCOME),
                ft.Container(
                    content=continue_button,
                    padding=ft.Padding(left=0, right=0, top=BUTTON_PADDING_VERTICAL, bottom=BUTTON_PADDING_VERTICAL),
                ),
            ],
            expand=True,
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )

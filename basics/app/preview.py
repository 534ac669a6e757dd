"""
Screen previews.

Renders a single screen in isolation with its own throwaway view state, so a
screen can be checked without walking through the app:

    basics-preview onboarding
    basics-preview greetings --dark
    basics-preview app
"""

from __future__ import annotations

import logging
from typing import Callable

import click
import flet as ft

from basics.app.main import configure_logging
from basics.app.state import ViewState, greeting_names
from basics.app.ui import strings
from basics.app.ui.layouts.shell import Surface
from basics.app.ui.screens.onboarding import build_onboarding_screen
from basics.app.ui.theme import apply_theme
from basics.shared.core.configuration import UIConfig
from basics.shared.core.event_bus import EventBus

logger = logging.getLogger(__name__)

PREVIEW_WIDTH = 320
PREVIEW_HEIGHT = 320


def preview_onboarding(page: ft.Page) -> ft.Control:
    """Onboarding screen with a no-op continue action."""
    return build_onboarding_screen(on_continue_clicked=lambda: None)


def preview_greetings(page: ft.Page) -> ft.Control:
    """Greetings list, already past onboarding."""
    view = ViewState(EventBus(), greeting_names())
    view.continue_onboarding()
    return Surface(page, view).container


def preview_app(page: ft.Page) -> ft.Control:
    """Whole app flow starting at onboarding."""
    return Surface(page, ViewState(EventBus(), greeting_names())).container


PREVIEWS: dict[str, Callable[[ft.Page], ft.Control]] = {
    "onboarding": preview_onboarding,
    "greetings": preview_greetings,
    "app": preview_app,
}


def build_preview(page: ft.Page, name: str, dark: bool = False) -> ft.Control:
    """Theme the page and build the named preview.

    Raises:
        KeyError: If no preview has that name
    """
    builder = PREVIEWS[name]
    apply_theme(page, UIConfig(
        theme_mode="dark" if dark else "light",
        window_width=PREVIEW_WIDTH,
        window_height=PREVIEW_HEIGHT,
    ))
    page.title = f"{strings.APP_TITLE} - {name} preview"
    return builder(page)


@click.command()
@click.argument('name', type=click.Choice(sorted(PREVIEWS)), default='app')
@click.option('--dark', is_flag=True, help='Render with the dark theme')
def cli(name: str, dark: bool):
    """Open a preview window for one screen."""
    configure_logging()
    logger.info(f"Opening {name} preview (dark={dark})")

    def _target(page: ft.Page) -> None:
        page.add(build_preview(page, name, dark))

    ft.run(_target, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    cli()

"""
Codelab Theme - fixed Material 3 palette.

The card color doubles as the theme seed so generated surfaces stay in the
same hue family.
"""

from __future__ import annotations

import flet as ft

from basics.shared.core.configuration import UIConfig

# =============================================================================
# PALETTE
# =============================================================================
PURPLE_80 = "#D0BCFF"
PURPLE_40 = "#6650A4"
PURPLE_GREY_40 = "#625B71"
WHITE = "#FFFFFF"

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
CARD_BG = PURPLE_40                   # Greeting card container
CARD_TEXT = WHITE                     # Text and icons on cards
TEXT_WELCOME = PURPLE_GREY_40         # Onboarding message

# =============================================================================
# SPACING (logical pixels)
# =============================================================================
LIST_PADDING_VERTICAL = 4
CARD_MARGIN_VERTICAL = 4
CARD_MARGIN_HORIZONTAL = 8
CARD_CONTENT_PADDING = 12
CARD_RADIUS = 12
BUTTON_PADDING_VERTICAL = 24

_THEME_MODES = {
    "light": ft.ThemeMode.LIGHT,
    "dark": ft.ThemeMode.DARK,
    "system": ft.ThemeMode.SYSTEM,
}


def get_theme_mode(name: str) -> ft.ThemeMode:
    """Map a configured theme mode name to Flet's enum."""
    return _THEME_MODES.get(name.lower(), ft.ThemeMode.SYSTEM)


def apply_theme(page: ft.Page, ui: UIConfig) -> None:
    """Apply the codelab theme and window size to a page."""
    page.theme = ft.Theme(color_scheme_seed=ui.primary_color, use_material3=True)
    page.dark_theme = ft.Theme(color_scheme_seed=PURPLE_80, use_material3=True)
    page.theme_mode = get_theme_mode(ui.theme_mode)
    page.padding = 0
    page.window.width = ui.window_width
    page.window.height = ui.window_height

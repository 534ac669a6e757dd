"""User-facing text."""

APP_TITLE = "Basics Codelab"

WELCOME = "Welcome to the Basics Codelab!"
CONTINUE = "Continue"

GREETING_PREFIX = "Hello, "
GREETING_DETAIL = ("Composem ipsum color sit lazy, " "padding theme elit, sed do bouncy. ") * 4

SHOW_MORE = "Show more"
SHOW_LESS = "Show less"

"""View State Management for the codelab app.

Architecture:
- ViewState: onboarding flag and per-row expansion, with change notifications
- Store: Service locator for accessing state from any component
- rows: the greeting row data source
"""

from .rows import DEFAULT_ROW_COUNT, greeting_names
from .store import Store
from .view_state import GreetingRow, Screen, ViewSnapshot, ViewState, initial_state

__all__ = [
    "DEFAULT_ROW_COUNT",
    "GreetingRow",
    "Screen",
    "Store",
    "ViewSnapshot",
    "ViewState",
    "greeting_names",
    "initial_state",
]

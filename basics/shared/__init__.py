"""
Basics Codelab Shared Kernel
============================

Framework-agnostic pieces used by the Flet app.

Architecture:
- core: EventBus, event definitions, configuration
- config: YAML settings (defaults, user)
"""

__version__ = "1.0.0"

__all__ = []

"""
Shared Core Module
==================

Event system and configuration.
"""

# Event System
from .event_bus import EventBus, EventPayload, EventHandler
from . import events

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    UIConfig,
    GreetingsConfig,
    get_config_manager,
    get_config,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "EventHandler",
    "events",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "UIConfig",
    "GreetingsConfig",
    "get_config_manager",
    "get_config",
    "ValidationLevel",
]

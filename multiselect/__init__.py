"""
multiselect - selection state for multiselect dropdowns.

Usage:
    from multiselect import DropdownItem, MultiSelectController

    controller = MultiSelectController()
    controller.set_items([DropdownItem("Apple", 1), DropdownItem("Banana", 2)])
    controller.select_at_index(1)
"""
from .core import (
    AppConfig,
    ConfigManager,
    ControllerSettings,
    LoggingSettings,
    Signal,
    Subscription,
    setup_logging,
)
from .ui import DropdownItem, MultiSelectController

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "ConfigManager",
    "ControllerSettings",
    "LoggingSettings",
    "Signal",
    "Subscription",
    "setup_logging",
    "DropdownItem",
    "MultiSelectController",
]

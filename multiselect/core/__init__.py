"""
Core services: observer signals, configuration and logging setup.
"""
from .events import Signal, Subscription
from .config import AppConfig, ConfigManager, ControllerSettings, LoggingSettings
from .logging import setup_logging

__all__ = [
    "Signal",
    "Subscription",
    "AppConfig",
    "ConfigManager",
    "ControllerSettings",
    "LoggingSettings",
    "setup_logging",
]

"""Shared settings and alert event types."""

from amnotify.core.config import (
    AlertmanagerConfig,
    LoggingConfig,
    Settings,
    get_settings,
    load_settings,
    reload_alertmanager_config,
    reset_settings,
)
from amnotify.core.logging import setup_logging
from amnotify.core.types import AlertEvent, AlertLevel

__all__ = [
    "AlertEvent",
    "AlertLevel",
    "AlertmanagerConfig",
    "LoggingConfig",
    "Settings",
    "get_settings",
    "load_settings",
    "reload_alertmanager_config",
    "reset_settings",
    "setup_logging",
]

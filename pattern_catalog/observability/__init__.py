"""
Observability for the pattern catalog.

This package provides context-carrying logging and event hooks for
monitoring and debugging demo runs.
"""

from .hooks import (
    DemoEvent,
    EventData,
    EventHookRegistry,
    default_hook_registry,
)
from .logging import CatalogLogger, configure_logging, get_logger

__all__ = [
    # Logging
    "CatalogLogger",
    "configure_logging",
    "get_logger",
    # Hooks
    "DemoEvent",
    "EventData",
    "EventHookRegistry",
    "default_hook_registry",
]

"""
Pattern catalog.

This package provides a registry of runnable design-pattern demos, a YAML
configuration layer for their options and a runner that executes them with
logging and event hooks.
"""

from pattern_catalog.config import CatalogConfig, DemoConfig
from pattern_catalog.observability import (
    CatalogLogger,
    DemoEvent,
    EventHookRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from pattern_catalog.registry import (
    DemoDefinition,
    DemoRegistry,
    PatternCategory,
    default_registry,
    demo,
)
from pattern_catalog.runner import CatalogRunner, DemoResult

__all__ = [
    # Core components
    "CatalogConfig",
    "CatalogRunner",
    "DemoConfig",
    "DemoDefinition",
    "DemoRegistry",
    "DemoResult",
    "PatternCategory",
    "default_registry",
    "demo",
    # Observability
    "CatalogLogger",
    "DemoEvent",
    "EventHookRegistry",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]

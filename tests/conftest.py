"""Shared fixtures for the pattern catalog tests."""

import logging

import pytest

from pattern_catalog import registry as registry_module
from pattern_catalog.observability import EventHookRegistry
from pattern_catalog.observability.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_catalog_logging():
    """Drop handlers installed by configure_logging so they don't leak between tests."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def restore_global_demos():
    """Undo registrations made through the @demo decorator during a test."""
    snapshot = dict(registry_module._DEMO_REGISTRY)  # pylint: disable=protected-access
    yield
    registry_module._DEMO_REGISTRY.clear()  # pylint: disable=protected-access
    registry_module._DEMO_REGISTRY.update(snapshot)  # pylint: disable=protected-access


@pytest.fixture
def hooks():
    """A private hook registry, so tests never touch the default one."""
    return EventHookRegistry()

"""
Runner for the pattern catalog.

This module provides a CatalogRunner class that looks up registered demos,
applies their configured options and runs them one at a time, by category
or all together, reporting every run through event hooks and logging.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pattern_catalog.config import CatalogConfig
from pattern_catalog.observability.hooks import (
    DemoEvent,
    EventHookRegistry,
    default_hook_registry,
)
from pattern_catalog.observability.logging import CatalogLogger, get_logger
from pattern_catalog.registry import (
    DemoDefinition,
    DemoRegistry,
    PatternCategory,
    default_registry,
)

PATTERNS_PACKAGE = "pattern_catalog.patterns"


@dataclass
class DemoResult:
    """Outcome of one demo run.

    Attributes:
        name: Demo name
        succeeded: Whether the driver returned without raising
        duration_ms: Wall-clock duration of the run
        value: What the driver returned
        error: The exception raised by the driver, if any
    """

    name: str
    succeeded: bool
    duration_ms: float
    value: Any = None
    error: Optional[Exception] = None


class CatalogRunner:
    """Runner coordinating the pattern demos.

    Usage:
        runner = CatalogRunner()
        runner.run_demo("state", product_count=2)

        results = runner.run_category(PatternCategory.STRUCTURAL)
        failed = [r.name for r in results if not r.succeeded]
    """

    def __init__(
        self,
        registry: Optional[DemoRegistry] = None,
        config: Optional[CatalogConfig] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Demo registry (defaults to the global registry)
            config: Catalog configuration with per-demo options
            hook_registry: Event hook registry for observability
            session_id: Session identifier for logging/tracing
        """
        self._registry = registry if registry is not None else default_registry
        self._config = config or CatalogConfig()
        self._hooks = hook_registry or default_hook_registry
        self.session_id = session_id or str(uuid.uuid4())

        self._logger: CatalogLogger = get_logger(
            name="runner",
            session=self.session_id,
        )

        if len(self._registry) == 0:
            self._registry.discover_package(PATTERNS_PACKAGE)

        for name, definition in self._registry.get_all().items():
            self._hooks.trigger(
                DemoEvent.DEMO_REGISTERED,
                demo_name=name,
                session_id=self.session_id,
                category=definition.category.value,
            )

        self._logger.info(
            "Runner initialized", data={"demos": len(self._registry)}
        )

    @property
    def config(self) -> CatalogConfig:
        """Get the catalog configuration."""
        return self._config

    @property
    def registry(self) -> DemoRegistry:
        """Get the demo registry."""
        return self._registry

    def list_demos(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Get demo names in registration order.

        Args:
            category: Only list demos of this family

        Returns:
            List of demo names
        """
        return self._registry.list_demos(category)

    def get_demo(self, name: str) -> DemoDefinition:
        """Get a demo by name.

        Args:
            name: Demo name

        Returns:
            The demo definition

        Raises:
            ValueError: If no demo has this name
        """
        definition = self._registry.get(name)
        if definition is None:
            raise ValueError(f"Demo '{name}' not found")
        return definition

    def run_demo(self, name: str, **options: Any) -> Any:
        """Run a single demo.

        Configured options are applied first; keyword arguments override them.

        Args:
            name: Demo name
            **options: Driver options

        Returns:
            Whatever the demo driver returns

        Raises:
            ValueError: If the demo is unknown or an option is not accepted
        """
        definition = self.get_demo(name)

        merged: Dict[str, Any] = self._config.options_for(name)
        merged.update(options)
        self._registry.validate_options(name, merged)

        category = definition.category.value
        start_time = time.perf_counter()

        self._hooks.trigger(
            DemoEvent.DEMO_START,
            demo_name=name,
            session_id=self.session_id,
            category=category,
            options=merged,
        )
        self._logger.info(
            "Demo starting", demo=name, category=category, data=merged
        )

        try:
            value = definition(**merged)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000

            self._hooks.trigger(
                DemoEvent.DEMO_ERROR,
                demo_name=name,
                session_id=self.session_id,
                category=category,
                duration_ms=duration_ms,
                error=e,
            )
            self._logger.error(
                f"Demo failed: {e}",
                demo=name,
                category=category,
                duration_ms=duration_ms,
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        self._hooks.trigger(
            DemoEvent.DEMO_END,
            demo_name=name,
            session_id=self.session_id,
            duration_ms=duration_ms,
            category=category,
        )
        self._logger.info(
            "Demo completed",
            demo=name,
            category=category,
            duration_ms=duration_ms,
        )

        return value

    def run_category(self, category: PatternCategory) -> List[DemoResult]:
        """Run every enabled demo of one pattern family.

        Args:
            category: Pattern family to run

        Returns:
            One result per enabled demo, in registration order
        """
        return self._run_many(self.list_demos(category), scope=category.value)

    def run_all(self) -> List[DemoResult]:
        """Run every enabled demo of the catalog.

        Returns:
            One result per enabled demo, in registration order
        """
        return self._run_many(self.list_demos(), scope="all")

    def _run_many(self, names: List[str], scope: str) -> List[DemoResult]:
        results: List[DemoResult] = []
        start_time = time.perf_counter()

        self._hooks.trigger(
            DemoEvent.CATALOG_START,
            session_id=self.session_id,
            scope=scope,
            demos=len(names),
        )

        for step, name in enumerate(names, start=1):
            if not self._config.is_enabled(name):
                self._hooks.trigger(
                    DemoEvent.DEMO_SKIPPED,
                    demo_name=name,
                    session_id=self.session_id,
                    scope=scope,
                )
                self._logger.debug("Demo disabled, skipping", demo=name, scope=scope, step=step)
                continue

            print(f"\n{'=' * 60}")
            print(f"{name.replace('_', ' ').title()}")
            print(f"{'=' * 60}")

            demo_start = time.perf_counter()
            try:
                value = self.run_demo(name)
            except Exception as e:  # pylint: disable=broad-exception-caught
                # Already reported by run_demo; keep going with the rest
                results.append(
                    DemoResult(
                        name=name,
                        succeeded=False,
                        duration_ms=(time.perf_counter() - demo_start) * 1000,
                        error=e,
                    )
                )
                print(f"\nError: {e}")
                continue

            results.append(
                DemoResult(
                    name=name,
                    succeeded=True,
                    duration_ms=(time.perf_counter() - demo_start) * 1000,
                    value=value,
                )
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        failed = sum(1 for r in results if not r.succeeded)

        self._hooks.trigger(
            DemoEvent.CATALOG_END,
            session_id=self.session_id,
            duration_ms=duration_ms,
            scope=scope,
            succeeded=len(results) - failed,
            failed=failed,
        )
        self._logger.info(
            f"Ran {len(results)} demos ({failed} failed)",
            duration_ms=duration_ms,
            scope=scope,
        )

        return results

    def __repr__(self) -> str:
        """String representation of the runner."""
        return (
            f"CatalogRunner(demos={len(self._registry)}, "
            f"session={self.session_id[:8]})"
        )

"""
Demo registration and discovery.

This module provides a decorator-based system for registering pattern demo
drivers, and a registry for discovering and looking them up by name or
category.
"""

import importlib
import inspect
import pkgutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from pattern_catalog.observability.logging import get_logger

_logger = get_logger("registry")


class PatternCategory(Enum):
    """The three classic families of design patterns."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


@dataclass
class DemoDefinition:
    """Definition of a runnable pattern demo.

    Attributes:
        name: Unique identifier for the demo
        category: Pattern family the demo belongs to
        description: Human-readable description of what the demo shows
        function: The driver that prints the demo output
        parameters: Dictionary describing the driver's options
    """

    name: str
    category: PatternCategory
    description: str
    function: Callable[..., Any]
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Run the demo driver."""
        return self.function(*args, **kwargs)


# Global registry of demos, filled in by the @demo decorator
_DEMO_REGISTRY: Dict[str, DemoDefinition] = {}


def _extract_parameters(func: Callable[..., Any]) -> Dict[str, Any]:
    sig = inspect.signature(func)
    parameters: Dict[str, Any] = {}

    for param_name, param in sig.parameters.items():
        param_info: Dict[str, Any] = {"name": param_name}

        if param.annotation != inspect.Parameter.empty:
            param_info["type"] = getattr(
                param.annotation, "__name__", str(param.annotation)
            )

        if param.default != inspect.Parameter.empty:
            param_info["default"] = param.default

        parameters[param_name] = param_info

    return parameters


def demo(
    name: Optional[str] = None,
    category: PatternCategory = PatternCategory.BEHAVIORAL,
    description: str = "",
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to register a function as a pattern demo driver.

    Usage:
        @demo(name="proxy", category=PatternCategory.STRUCTURAL)
        def main() -> None:
            ...

    Args:
        name: Demo name (defaults to function name)
        category: Pattern family
        description: Description of the demo (defaults to the docstring)

    Returns:
        Decorator function
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        demo_name = name or func.__name__
        demo_description = description or inspect.getdoc(func) or ""

        _DEMO_REGISTRY[demo_name] = DemoDefinition(
            name=demo_name,
            category=category,
            description=demo_description,
            function=func,
            parameters=_extract_parameters(func),
        )

        # The driver stays directly callable
        return func

    return decorator


class DemoRegistry:
    """Registry for managing and discovering demos.

    This class provides methods to register, discover and retrieve demos
    from the global registry and from any package of demo modules.
    """

    def __init__(self, load_global: bool = True) -> None:
        """Initialize the registry.

        Args:
            load_global: Whether to start with every @demo registered so far
        """
        self._demos: Dict[str, DemoDefinition] = {}
        if load_global:
            self._load_global_registry()

    def _load_global_registry(self) -> None:
        for demo_name, definition in _DEMO_REGISTRY.items():
            self._demos.setdefault(demo_name, definition)

    def register(self, definition: DemoDefinition) -> None:
        """Register a demo definition.

        Args:
            definition: The demo definition to register
        """
        self._demos[definition.name] = definition

    def register_function(
        self,
        func: Callable[..., Any],
        name: Optional[str] = None,
        category: PatternCategory = PatternCategory.BEHAVIORAL,
        description: str = "",
    ) -> DemoDefinition:
        """Register a plain function as a demo without the decorator.

        Args:
            func: The driver to register
            name: Demo name (defaults to function name)
            category: Pattern family
            description: Description of the demo

        Returns:
            The created DemoDefinition
        """
        definition = DemoDefinition(
            name=name or func.__name__,
            category=category,
            description=description or inspect.getdoc(func) or "",
            function=func,
            parameters=_extract_parameters(func),
        )
        self.register(definition)
        return definition

    def get(self, name: str) -> Optional[DemoDefinition]:
        """Get a demo by name.

        Args:
            name: The demo name

        Returns:
            DemoDefinition if found, None otherwise
        """
        return self._demos.get(name)

    def list_demos(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Get demo names in registration order.

        Args:
            category: Only list demos of this family

        Returns:
            List of demo names
        """
        return [
            demo_name
            for demo_name, definition in self._demos.items()
            if category is None or definition.category == category
        ]

    def get_all(self) -> Dict[str, DemoDefinition]:
        """Get all registered demos.

        Returns:
            Dictionary of demo name to DemoDefinition
        """
        return dict(self._demos)

    def validate_options(self, name: str, options: Mapping[str, Any]) -> None:
        """Check that every option is a parameter of the demo driver.

        Args:
            name: The demo name
            options: Options that will be passed to the driver

        Raises:
            KeyError: If the demo is not registered
            ValueError: If an option is not accepted by the driver
        """
        definition = self._demos.get(name)
        if definition is None:
            raise KeyError(name)

        unknown = sorted(set(options) - set(definition.parameters))
        if unknown:
            raise ValueError(
                f"Demo '{name}' does not accept option(s): {', '.join(unknown)}"
            )

    def discover_package(self, package: str) -> int:
        """Import every module of a package so its demos register.

        Args:
            package: Dotted name of the package holding demo modules

        Returns:
            Number of demos discovered
        """
        initial_count = len(self._demos)
        root = importlib.import_module(package)

        for module_info in pkgutil.iter_modules(
            getattr(root, "__path__", []), prefix=f"{package}."
        ):
            if module_info.name.rsplit(".", 1)[-1].startswith("_"):
                continue

            try:
                importlib.import_module(module_info.name)
            except ImportError as e:
                _logger.warning(
                    f"Failed to load demo module {module_info.name}: {e}",
                    exc_info=True,
                )

        self._load_global_registry()

        discovered = len(self._demos) - initial_count
        _logger.debug(
            f"Discovered {discovered} demos in {package}",
            data={"total": len(self._demos)},
        )
        return discovered

    def __len__(self) -> int:
        return len(self._demos)

    def __contains__(self, name: object) -> bool:
        return name in self._demos


default_registry = DemoRegistry()

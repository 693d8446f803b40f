"""
Catalog configuration management with YAML support.

This module provides dataclasses for per-demo options and catalog-wide
settings, and utilities for loading them from YAML files.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class DemoConfig:
    """Configuration for a single pattern demo.

    Attributes:
        name: Name the demo was registered under
        enabled: Whether catalog-wide runs include the demo
        options: Keyword arguments passed to the demo driver
        description: Human-readable note about the configuration
    """

    name: str
    enabled: bool = True
    options: Dict[str, Any] = field(default_factory=dict)
    description: str = ""

    @classmethod
    def from_yaml(cls, path: Path | str) -> "DemoConfig":
        """Load demo configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            DemoConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Demo config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DemoConfig":
        """Create demo configuration from a dictionary.

        Args:
            data: Dictionary with configuration values

        Returns:
            DemoConfig instance
        """
        return cls(
            name=data["name"],
            enabled=data.get("enabled", True),
            options=dict(data.get("options") or {}),
            description=data.get("description", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            "name": self.name,
            "enabled": self.enabled,
            "options": self.options,
            "description": self.description,
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


@dataclass
class CatalogConfig:
    """Configuration for the whole catalog.

    Attributes:
        demos: Per-demo configurations
        log_level: Minimum level for the catalog loggers
        json_logs: Whether console logs are JSON instead of human-readable
        use_colors: Whether human-readable logs use ANSI colors
        log_file: Optional file receiving JSON logs
    """

    demos: List[DemoConfig] = field(default_factory=list)
    log_level: str = "WARNING"
    json_logs: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogConfig":
        """Load catalog configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogConfig instance

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Create catalog configuration from a dictionary.

        Args:
            data: Dictionary with configuration values

        Returns:
            CatalogConfig instance
        """
        demos = [DemoConfig.from_dict(d) for d in data.get("demos") or []]

        return cls(
            demos=demos,
            log_level=data.get("log_level", "WARNING"),
            json_logs=data.get("json_logs", False),
            use_colors=data.get("use_colors", True),
            log_file=data.get("log_file"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "use_colors": self.use_colors,
            "log_file": self.log_file,
            "demos": [d.to_dict() for d in self.demos],
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def get_demo(self, name: str) -> Optional[DemoConfig]:
        """Get the configuration of a demo.

        Args:
            name: Demo name

        Returns:
            DemoConfig or None if the demo is not configured
        """
        for demo_config in self.demos:
            if demo_config.name == name:
                return demo_config
        return None

    def is_enabled(self, name: str) -> bool:
        """Check whether a demo takes part in catalog-wide runs.

        Demos that are not configured are enabled.
        """
        demo_config = self.get_demo(name)
        return demo_config.enabled if demo_config else True

    def options_for(self, name: str) -> Dict[str, Any]:
        """Get the driver options configured for a demo."""
        demo_config = self.get_demo(name)
        return dict(demo_config.options) if demo_config else {}

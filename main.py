#!/usr/bin/env python3
"""
Design Pattern Catalog Demo.

This script lets you run the catalog's pattern demos:
1. A single demo, picked by number or name
2. Every demo of one pattern family
3. The whole catalog

Per-demo options and logging are read from the YAML file named by
``CATALOG_CONFIG`` (default ``config/catalog.yaml``).

Usage:
    python main.py
"""
# pylint: disable=wrong-import-position

import os
import sys
from pathlib import Path
from typing import List, Optional

try:
    from dotenv import load_dotenv
except ImportError:
    print("Error: python-dotenv is required. Install with: pip install python-dotenv")
    sys.exit(1)

# Load environment variables
load_dotenv(override=True)

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from pattern_catalog import (
    CatalogConfig,
    CatalogRunner,
    DemoResult,
    PatternCategory,
    configure_logging,
)

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "catalog.yaml"


def load_config() -> CatalogConfig:
    """Load the catalog configuration, falling back to defaults."""
    config_path = Path(os.getenv("CATALOG_CONFIG", str(DEFAULT_CONFIG_PATH)))

    if config_path.exists():
        config = CatalogConfig.from_yaml(config_path)
    else:
        config = CatalogConfig()

    level = os.getenv("CATALOG_LOG_LEVEL")
    if level:
        config.log_level = level

    return config


def print_menu(runner: CatalogRunner) -> List[str]:
    """Print the demos grouped by family.

    Returns:
        Demo names in the order they were numbered
    """
    numbered: List[str] = []

    print("\nAvailable demos:")
    for category in PatternCategory:
        names = runner.list_demos(category)
        if not names:
            continue

        print(f"\n{category.value.title()}:")
        for name in names:
            numbered.append(name)
            description = runner.get_demo(name).description
            print(f"{len(numbered):>3}. {name} - {description}")

    print("\n  a. All - Run every demo")
    print("  c. Category - Run one pattern family")
    print("  q. Quit")
    return numbered


def resolve_choice(choice: str, numbered: List[str]) -> Optional[str]:
    """Map a menu entry (number or name) to a demo name."""
    if choice.isdigit():
        index = int(choice) - 1
        if 0 <= index < len(numbered):
            return numbered[index]
        return None
    return choice if choice in numbered else None


def report(results: List[DemoResult]) -> int:
    """Print a summary line and return the exit code."""
    failed = [r.name for r in results if not r.succeeded]

    print(f"\n{'─' * 40}")
    print(f"Ran {len(results)} demos, {len(failed)} failed")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    return 1 if failed else 0


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("Design Pattern Catalog")
    print("=" * 60)

    try:
        config = load_config()
        configure_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.json_logs,
            use_colors=config.use_colors,
        )

        runner = CatalogRunner(config=config)
        numbered = print_menu(runner)

        choice = input("\nSelect demo (number/name/a/c/q): ").strip().lower()

        if choice in ("q", "quit", "exit"):
            print("Goodbye!")
            return 0
        if choice in ("a", "all"):
            return report(runner.run_all())
        if choice in ("c", "category"):
            families = "/".join(c.value for c in PatternCategory)
            family = input(f"Category ({families}): ").strip().lower()
            return report(runner.run_category(PatternCategory(family)))

        name = resolve_choice(choice, numbered)
        if name is None:
            print("Invalid choice. Please select a number, a demo name, a, c, or q.")
            return 1

        print(f"\n{'=' * 60}")
        print(name.replace("_", " ").title())
        print("=" * 60)
        runner.run_demo(name)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 0
    except (ValueError, TypeError, RuntimeError, KeyError, OSError) as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

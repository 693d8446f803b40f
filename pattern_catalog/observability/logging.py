"""
Logging for the pattern catalog.

Records carry the catalog's own context as attributes: the run session, the
scope of a batch run, the pattern family and demo, the step within a batch,
a duration and free-form ``data``. Both formatters render that context, so a
line can be traced back to the demo and run that produced it. Demo output
itself is printed by the drivers, not logged.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Tuple, Union

ROOT_LOGGER_NAME = "pattern_catalog"

# Order in which context appears in formatted output
CONTEXT_FIELDS = ("session", "scope", "category", "demo", "step", "duration_ms", "data")


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the catalog context attached to a record."""
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, context fields at the top level."""

    def __init__(self, include_timestamp: bool = True) -> None:
        super().__init__()
        self._include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self._include_timestamp:
            entry["time"] = self.formatTime(record, "%Y-%m-%dT%H:%M:%S")

        entry.update(record_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Console formatter.

    A finished ``state`` demo renders as::

        12:00:01 INFO     0c1f2a9b behavioral/state | Demo completed (1.52 ms)

    where the session is cut to eight characters and ``data`` items are
    appended as ``key=value`` pairs.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _level(self, levelname: str) -> str:
        padded = f"{levelname:8}"
        if not self._use_colors:
            return padded
        return f"{self.COLORS.get(levelname, '')}{padded}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        context = record_context(record)

        head = [self.formatTime(record, "%H:%M:%S"), self._level(record.levelname)]
        if "session" in context:
            head.append(str(context["session"])[:8])

        where = "/".join(
            str(context[key]) for key in ("scope", "category", "demo") if key in context
        )
        if "step" in context:
            where = f"{where} #{context['step']}".strip()
        if where:
            head.append(where)

        line = f"{' '.join(head)} | {record.getMessage()}"

        if "duration_ms" in context:
            line += f" ({context['duration_ms']} ms)"

        data = context.get("data")
        if isinstance(data, dict):
            line += "".join(f" {key}={value}" for key, value in data.items())
        elif data is not None:
            line += f" {data}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


class CatalogLogger(logging.LoggerAdapter):
    """Logger adapter that attaches catalog context to every record.

    Context passed to ``get_logger`` is bound to the adapter; any of the
    context fields can also be given per call and win over the bound value.

    Usage:
        logger = get_logger("runner", session=session_id)
        logger.info("Demo completed", demo="state", category="behavioral", duration_ms=1.5)
        logger.debug("Loaded", data={"file": "test.jpg"})
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        context = dict(self.extra or {})
        for key in CONTEXT_FIELDS:
            if key in kwargs:
                context[key] = kwargs.pop(key)

        if context.get("duration_ms") is not None:
            context["duration_ms"] = round(context["duration_ms"], 2)
        if not context.get("data"):
            context.pop("data", None)

        kwargs["extra"] = {k: v for k, v in context.items() if v is not None}
        return msg, kwargs


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    use_colors: bool = True,
) -> None:
    """Install the catalog's handlers on the ``pattern_catalog`` logger.

    Console output goes to stdout, as JSON or human-readable text. When
    ``log_file`` is given, records are also appended to it as JSON lines.

    Args:
        level: Minimum level, as a number or a name such as ``"info"``
        log_file: Optional JSON-lines log file; parent directories are created
        json_format: Use JSON on the console as well
        use_colors: Color the level name in human-readable output

    Raises:
        ValueError: If ``level`` is a string that names no log level
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        StructuredFormatter() if json_format else HumanReadableFormatter(use_colors)
    )
    root_logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str, **context: Any) -> CatalogLogger:
    """Get a logger under ``pattern_catalog`` with bound context.

    Args:
        name: Name below the catalog root, e.g. ``"runner"`` or ``"patterns.proxy"``
        **context: Context fields bound to every record, e.g. ``session=...``

    Returns:
        CatalogLogger wrapping ``pattern_catalog.<name>``
    """
    return CatalogLogger(logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}"), context)

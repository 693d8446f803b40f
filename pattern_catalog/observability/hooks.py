"""
Event hooks for the pattern catalog.

The runner announces each registered demo, the start, end, failure or skip
of every demo run, and the start and end of batch runs (a category or the
whole catalog). Callbacks subscribed here receive an ``EventData`` for each.
"""

from collections import defaultdict
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .logging import get_logger

_logger = get_logger("hooks")


class DemoEvent(Enum):
    """Points in the catalog lifecycle the runner reports."""

    DEMO_REGISTERED = "demo_registered"
    DEMO_START = "demo_start"
    DEMO_END = "demo_end"
    DEMO_ERROR = "demo_error"
    DEMO_SKIPPED = "demo_skipped"

    CATALOG_START = "catalog_start"
    CATALOG_END = "catalog_end"


@dataclass(frozen=True)
class EventData:
    """What a hook receives.

    Attributes:
        event: The event type
        session_id: Runner session that emitted the event
        demo_name: Demo the event is about, for demo events
        category: Pattern family of that demo
        scope: ``"all"`` or a category name, for batch events
        duration_ms: Duration of the demo or batch, for end and error events
        error: Exception raised by the driver, for ``DEMO_ERROR``
        data: Anything else the runner reported (options, counts)
        timestamp: When the event was emitted
    """

    event: DemoEvent
    session_id: Optional[str] = None
    demo_name: Optional[str] = None
    category: Optional[str] = None
    scope: Optional[str] = None
    duration_ms: Optional[float] = None
    error: Optional[BaseException] = None
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


_EVENT_FIELDS = {f.name for f in fields(EventData)} - {"event", "data", "timestamp"}

HookCallback = Callable[[EventData], None]


class EventHookRegistry:
    """Subscribers to catalog events.

    Usage:
        hooks = EventHookRegistry()
        hooks.on(DemoEvent.DEMO_END, lambda e: print(e.demo_name, e.duration_ms))
        hooks.on_all(events.append)

        runner = CatalogRunner(hook_registry=hooks)
    """

    def __init__(self) -> None:
        # None holds the callbacks subscribed to every event
        self._subscribers: Dict[Optional[DemoEvent], List[HookCallback]] = defaultdict(list)

    def on(self, event: DemoEvent, callback: HookCallback) -> None:
        """Call ``callback`` whenever ``event`` is triggered."""
        if callback not in self._subscribers[event]:
            self._subscribers[event].append(callback)

    def on_all(self, callback: HookCallback) -> None:
        """Call ``callback`` for every event."""
        if callback not in self._subscribers[None]:
            self._subscribers[None].append(callback)

    def trigger(self, event: DemoEvent, **values: Any) -> EventData:
        """Build the event and hand it to its subscribers.

        Keyword arguments naming an ``EventData`` attribute fill that attribute;
        the rest are collected into ``data``. Subscribers to the event run
        before subscribers to every event. A subscriber that raises is logged
        and skipped.

        Args:
            event: Event type
            **values: Event attributes and extra data

        Returns:
            The event that was delivered
        """
        attributes = {k: v for k, v in values.items() if k in _EVENT_FIELDS}
        extra = {k: v for k, v in values.items() if k not in _EVENT_FIELDS}
        event_data = EventData(event=event, data=extra, **attributes)

        for callback in self._subscribers.get(event, []) + self._subscribers.get(None, []):
            try:
                callback(event_data)
            except Exception:  # pylint: disable=broad-exception-caught
                _logger.warning(
                    f"Hook {getattr(callback, '__name__', callback)!r} failed on {event.value}",
                    demo=event_data.demo_name,
                    session=event_data.session_id,
                    exc_info=True,
                )

        return event_data


default_hook_registry = EventHookRegistry()

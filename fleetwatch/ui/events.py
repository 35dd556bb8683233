"""
ui/events.py - Component session events

The component session publishes its state transitions here so views can
refresh without polling. Each session may own a bus; sessions created
without one share the module-level `event_bus`.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional
from datetime import datetime, timezone
from enum import Enum
import uuid
import logging

logger = logging.getLogger("ui.events")


class EventType(Enum):
    """Component session event types."""

    # Vessel / fetch lifecycle
    VESSEL_SELECTED = "vessel_selected"
    COMPONENTS_LOADING = "components_loading"
    COMPONENTS_LOADED = "components_loaded"
    COMPONENTS_FAILED = "components_failed"
    STALE_RESPONSE_DISCARDED = "stale_response_discarded"

    # View state
    FILTERS_CHANGED = "filters_changed"
    SELECTION_CHANGED = "selection_changed"
    EXPANSION_CHANGED = "expansion_changed"
    TAB_CHANGED = "tab_changed"


@dataclass
class ComponentEvent:
    """One published state transition."""

    event_type: EventType
    vessel_id: Optional[str] = None
    source: str = ""
    payload: Dict[str, Any] = field(default_factory=dict)
    event_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "type": self.event_type.value,
            "vessel_id": self.vessel_id,
            "source": self.source,
            "timestamp": self.timestamp.isoformat(),
            "payload": self.payload,
        }

    @classmethod
    def components_loaded(
        cls, vessel_id: str, total: int, roots: int, source: str = "components.session",
    ) -> "ComponentEvent":
        return cls(
            event_type=EventType.COMPONENTS_LOADED,
            vessel_id=vessel_id,
            source=source,
            payload={"total": total, "roots": roots},
        )

    @classmethod
    def components_failed(
        cls, vessel_id: str, error: Dict[str, Any], source: str = "components.session",
    ) -> "ComponentEvent":
        return cls(
            event_type=EventType.COMPONENTS_FAILED,
            vessel_id=vessel_id,
            source=source,
            payload={"error": error},
        )


EventHandler = Callable[[ComponentEvent], None]


class EventBus:
    """
    Publish/subscribe hub for component events.

    Handlers are registered per event type, or for every type with
    `subscribe_all`. A failing handler is logged and never reaches the
    publisher or the remaining handlers. The most recent events are kept
    for inspection.
    """

    def __init__(self, max_history: int = 100):
        # Key None holds the handlers that receive every event type
        self._handlers: Dict[Optional[EventType], List[EventHandler]] = {}
        self._history: Deque[ComponentEvent] = deque(maxlen=max_history)

    def subscribe(self, event_type: Optional[EventType], handler: EventHandler) -> None:
        """
        Register a handler.

        Args:
            event_type: Type to receive, None for every type
            handler: Callback function(event) -> None
        """
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self.subscribe(None, handler)

    def unsubscribe(self, event_type: Optional[EventType], handler: EventHandler) -> bool:
        """Remove a handler; True if it was registered."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def emit(self, event: ComponentEvent) -> None:
        self._history.append(event)
        logger.debug(f"Event {event.event_type.value} for vessel {event.vessel_id} from {event.source}")

        targets = self._handlers.get(event.event_type, []) + self._handlers.get(None, [])
        for handler in targets:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler for {event.event_type.value} failed: {e}")

    def publish(
        self,
        event_type: EventType,
        vessel_id: Optional[str] = None,
        source: str = "",
        **payload: Any,
    ) -> ComponentEvent:
        """Build an event from keyword payload, emit it and return it."""
        event = ComponentEvent(event_type=event_type, vessel_id=vessel_id, source=source, payload=payload)
        self.emit(event)
        return event

    def get_history(self, event_type: Optional[EventType] = None) -> List[ComponentEvent]:
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.event_type == event_type]

    def clear(self) -> None:
        """Drop every handler and the history."""
        self._handlers.clear()
        self._history.clear()

    @property
    def handler_count(self) -> int:
        return sum(len(handlers) for handlers in self._handlers.values())


# Default bus for sessions created without one
event_bus = EventBus()

"""
ui/ - User Interface Layer

Event bus and tree projection used by the dashboard views and the CLI.
"""

from .events import (
    EventType,
    ComponentEvent,
    EventBus,
    event_bus,
)

from .tree_view import (
    TreeRow,
    visible_rows,
    render_ascii,
    render_inventory,
)


__all__ = [
    # Events
    "EventType",
    "ComponentEvent",
    "EventBus",
    "event_bus",
    # Tree view
    "TreeRow",
    "visible_rows",
    "render_ascii",
    "render_inventory",
]

"""
components/selection.py - Currently inspected component.

One selection is shared by the installed tree and the inventory list; the
detail panel shows whichever was picked last.
"""

from __future__ import annotations
from typing import Optional


class SelectionState:
    """Holds at most one selected component id."""

    def __init__(self):
        self._selected_id: Optional[int] = None

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected_id

    @property
    def has_selection(self) -> bool:
        return self._selected_id is not None

    def select(self, component_id: int) -> None:
        self._selected_id = component_id

    def is_selected(self, component_id: int) -> bool:
        return self._selected_id is not None and self._selected_id == component_id

    def clear(self) -> None:
        self._selected_id = None

    def reset(self) -> None:
        """Drop the selection on vessel change."""
        self._selected_id = None

"""
components/session.py - Per-vessel component session.

Orchestrates one dashboard's component view:

    IDLE -> LOADING -> READY
               \\-> FAILED  (retry -> LOADING)

Selecting a different vessel is a full invalidation boundary: expansion,
selection, filters, the active tab and all derived data are reset before
the fetch starts. Every fetch is tagged with a generation number and only
the response of the most recent request is applied; anything older is
discarded silently.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Union
import logging

from .enums import ComponentTab, CriticalityFilter, SessionStatus
from .errors import ComponentErrorCategory, ComponentFetchError, ComponentNotFoundError
from .expansion import ExpansionState
from .filters import FilterCriteria, filter_forest, filter_list, parse_criticality
from .running_hours import annotate_running_hours, now_ms
from .schema import Component, ComponentStatistics, TreeNode, VesselSummary
from .selection import SelectionState
from .statistics import compute_statistics
from .tree_builder import build_forest

from ..config import get_config
from ..ui.events import ComponentEvent, EventBus, EventType, event_bus

logger = logging.getLogger("components.session")

NO_VESSEL_NAME = "Select Vessel"


class ComponentRepository(Protocol):
    """Source of a vessel's flat component list."""

    async def fetch_by_vessel(self, vessel_id: str) -> List[Component]:
        """Return all records of a vessel or raise ComponentFetchError."""
        ...


class ComponentSession:
    """
    Component view state for one dashboard.

    Holds the flat record list of the selected vessel and everything
    derived from it (forest, statistics), plus the view state (filters,
    expansion, selection, active tab). Filtering is recomputed on every
    read so results always reflect the current criteria.
    """

    SOURCE = "components.session"

    def __init__(
        self,
        repository: ComponentRepository,
        *,
        clock: Callable[[], int] = now_ms,
        bus: Optional[EventBus] = None,
        emit_events: Optional[bool] = None,
    ):
        """
        Initialize session.

        Args:
            repository: Component source for vessel fetches
            clock: Returns current epoch milliseconds
            bus: Event bus to publish on (default: module-level event_bus)
            emit_events: Override the configured event publication flag
        """
        self._repository = repository
        self._clock = clock
        self._bus = bus if bus is not None else event_bus
        self._emit_events = get_config().emit_events if emit_events is None else emit_events

        self._status = SessionStatus.IDLE
        self._vessel_id: Optional[str] = None
        self._vessels: List[VesselSummary] = []
        self._generation = 0
        self._error: Optional[ComponentFetchError] = None

        self._components: List[Component] = []
        self._forest: List[TreeNode] = []
        self._statistics = ComponentStatistics()

        self._criteria = FilterCriteria()
        self._active_tab = ComponentTab.INSTALLED
        self.expansion = ExpansionState()
        self.selection = SelectionState()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def vessel_id(self) -> Optional[str]:
        return self._vessel_id

    @property
    def error(self) -> Optional[ComponentFetchError]:
        """Error of the last failed fetch, None otherwise."""
        return self._error

    @property
    def components(self) -> List[Component]:
        """Full, unfiltered record list of the current vessel."""
        return list(self._components)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def has_active_filters(self) -> bool:
        return not self._criteria.is_identity

    @property
    def active_tab(self) -> ComponentTab:
        return self._active_tab

    @property
    def vessels(self) -> List[VesselSummary]:
        return list(self._vessels)

    @property
    def selected_vessel_name(self) -> str:
        for vessel in self._vessels:
            if vessel.id == self._vessel_id:
                return vessel.name
        return NO_VESSEL_NAME

    # =========================================================================
    # VESSEL SELECTION AND FETCH
    # =========================================================================

    def set_vessels(self, vessels: Iterable[VesselSummary]) -> None:
        """Record the fleet list used for default selection and names."""
        self._vessels = list(vessels)

    async def select_default_vessel(self) -> bool:
        """Select the first known vessel if nothing is selected yet."""
        if self._vessel_id or not self._vessels:
            return False
        return await self.select_vessel(self._vessels[0].id)

    async def select_vessel(self, vessel_id: str) -> bool:
        """
        Switch to a vessel and load its components.

        Args:
            vessel_id: Vessel to show

        Returns:
            True if this call's response was applied
        """
        if not vessel_id:
            return False
        if vessel_id == self._vessel_id and self._status != SessionStatus.IDLE:
            return False

        logger.info(f"Vessel selected: {vessel_id}")
        self._vessel_id = vessel_id
        self._reset_view_state()
        self._components = []
        self._forest = []
        self._statistics = ComponentStatistics()
        self._error = None
        self._emit(EventType.VESSEL_SELECTED, vessel_id=vessel_id)

        return await self._load(vessel_id)

    async def retry(self) -> bool:
        """
        Fetch the current vessel again.

        Filters, expansion and selection are kept. Existing data stays in
        place until the new fetch succeeds.

        Returns:
            True if the response was applied
        """
        if not self._vessel_id:
            return False
        return await self._load(self._vessel_id)

    async def _load(self, vessel_id: str) -> bool:
        self._generation += 1
        generation = self._generation
        self._status = SessionStatus.LOADING
        self._emit(EventType.COMPONENTS_LOADING, vessel_id=vessel_id)

        try:
            records = await self._repository.fetch_by_vessel(vessel_id)
        except ComponentFetchError as e:
            return self._fail(generation, vessel_id, e)
        except Exception as e:
            # Repositories are opaque: any other failure is still a fetch failure
            error = ComponentFetchError(vessel_id, str(e) or e.__class__.__name__)
            error.__cause__ = e
            return self._fail(generation, vessel_id, error)

        if generation != self._generation:
            self._discard_stale(vessel_id)
            return False

        self._apply(records)
        return True

    def _fail(self, generation: int, vessel_id: str, error: ComponentFetchError) -> bool:
        if generation != self._generation:
            self._discard_stale(vessel_id)
            return False
        logger.warning(f"Component fetch failed: {error}")
        self._status = SessionStatus.FAILED
        self._error = error
        self._bus_emit(ComponentEvent.components_failed(vessel_id, error.to_dict(), source=self.SOURCE))
        return False

    def _apply(self, records: Iterable[Component]) -> None:
        annotated = annotate_running_hours(records, self._clock())
        self._components = annotated
        self._statistics = compute_statistics(annotated)
        self._forest = build_forest(annotated)
        self._error = None
        self._status = SessionStatus.READY

        logger.info(
            f"Loaded {self._statistics.total} components for vessel {self._vessel_id} "
            f"({self._statistics.mounted} mounted, {len(self._forest)} roots)"
        )
        self._bus_emit(ComponentEvent.components_loaded(
            self._vessel_id, self._statistics.total, len(self._forest), source=self.SOURCE,
        ))

    def _discard_stale(self, vessel_id: str) -> None:
        logger.debug(f"Discarding stale response for vessel {vessel_id}")
        self._emit(
            EventType.STALE_RESPONSE_DISCARDED,
            vessel_id=vessel_id,
            category=ComponentErrorCategory.STALE_RESPONSE.value,
        )

    def _reset_view_state(self) -> None:
        self.expansion.reset()
        self.selection.reset()
        self._criteria = FilterCriteria()
        self._active_tab = ComponentTab.INSTALLED

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    def get_forest(self) -> List[TreeNode]:
        """Installed forest with the current filters applied."""
        return filter_forest(self._forest, self._criteria)

    def get_unfiltered_forest(self) -> List[TreeNode]:
        return list(self._forest)

    def get_inventory(self) -> List[Component]:
        """Unmounted records with the current filters applied."""
        unmounted = [c for c in self._components if not c.is_mounted]
        return filter_list(unmounted, self._criteria)

    def get_statistics(self) -> ComponentStatistics:
        return self._statistics

    def get_component(self, component_id: int) -> Component:
        for component in self._components:
            if component.id == component_id:
                return component
        raise ComponentNotFoundError(component_id, vessel_id=self._vessel_id or "")

    # =========================================================================
    # FILTERS
    # =========================================================================

    def set_search_text(self, text: str) -> None:
        self._criteria = FilterCriteria(search_text=text or "", criticality=self._criteria.criticality)
        self._emit(EventType.FILTERS_CHANGED, **self._criteria.to_dict())

    def set_criticality_filter(self, value: Union[str, CriticalityFilter]) -> None:
        """
        Set the criticality toggle.

        Raises:
            InvalidFilterError: value is not all / critical / not_critical
        """
        criticality = parse_criticality(value)
        self._criteria = FilterCriteria(search_text=self._criteria.search_text, criticality=criticality)
        self._emit(EventType.FILTERS_CHANGED, **self._criteria.to_dict())

    def clear_filters(self) -> None:
        self._criteria = FilterCriteria()
        self._emit(EventType.FILTERS_CHANGED, **self._criteria.to_dict())

    # =========================================================================
    # EXPANSION
    # =========================================================================

    def toggle(self, node_id: int) -> bool:
        expanded = self.expansion.toggle(node_id)
        self._emit(EventType.EXPANSION_CHANGED, node_id=node_id, expanded=expanded)
        return expanded

    def expand_all(self) -> None:
        # Unfiltered forest: expand-all ignores the current search
        self.expansion.expand_all(self._forest)
        self._emit(EventType.EXPANSION_CHANGED, expanded_count=len(self.expansion))

    def collapse_all(self) -> None:
        self.expansion.collapse_all()
        self._emit(EventType.EXPANSION_CHANGED, expanded_count=0)

    # =========================================================================
    # SELECTION AND TABS
    # =========================================================================

    def select(self, component_id: int) -> None:
        self.selection.select(component_id)
        self._emit(EventType.SELECTION_CHANGED, component_id=component_id)

    def clear_selection(self) -> None:
        self.selection.clear()
        self._emit(EventType.SELECTION_CHANGED, component_id=None)

    @property
    def selected_component(self) -> Optional[Component]:
        """Selected record resolved against the current list."""
        selected_id = self.selection.selected_id
        if selected_id is None:
            return None
        for component in self._components:
            if component.id == selected_id:
                return component
        return None

    def set_active_tab(self, tab: Union[str, ComponentTab]) -> None:
        self._active_tab = ComponentTab(tab)
        self._emit(EventType.TAB_CHANGED, tab=self._active_tab.value)

    # =========================================================================
    # SUMMARY
    # =========================================================================

    def get_summary(self) -> Dict[str, Any]:
        """Serializable snapshot of the session state."""
        return {
            "status": self._status.value,
            "vessel_id": self._vessel_id,
            "vessel_name": self.selected_vessel_name,
            "error": self._error.to_dict() if self._error else None,
            "criteria": self._criteria.to_dict(),
            "active_tab": self._active_tab.value,
            "expanded_ids": sorted(self.expansion.expanded_ids),
            "selected_id": self.selection.selected_id,
            "statistics": self._statistics.to_dict(),
        }

    # =========================================================================
    # EVENTS
    # =========================================================================

    def _emit(self, event_type: EventType, **payload: Any) -> None:
        if self._emit_events:
            vessel_id = payload.pop("vessel_id", self._vessel_id)
            self._bus.publish(event_type, vessel_id=vessel_id, source=self.SOURCE, **payload)

    def _bus_emit(self, event: ComponentEvent) -> None:
        if self._emit_events:
            self._bus.emit(event)

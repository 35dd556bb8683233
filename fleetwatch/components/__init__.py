"""
components/ - Component Hierarchy Engine

Turns a vessel's flat equipment list into a navigable forest of installed
components, filters it by search text and criticality, separates the
unmounted inventory, and derives running hours and summary counts.
"""

from .enums import (
    CriticalityFilter,
    SessionStatus,
    ConditionStatus,
    ComponentTab,
)

from .schema import (
    ROOT_PARENT_ID,
    Component,
    TreeNode,
    ComponentStatistics,
    VesselSummary,
)

from .errors import (
    ComponentErrorCategory,
    ComponentErrorSeverity,
    ComponentError,
    ComponentFetchError,
    InvalidFilterError,
    ComponentNotFoundError,
    error_response,
)

from .running_hours import (
    MS_PER_HOUR,
    now_ms,
    parse_epoch_ms,
    hours,
    annotate_running_hours,
)

from .tree_builder import (
    build_forest,
    iter_nodes,
    count_nodes,
    find_node,
    parent_node_ids,
)

from .statistics import compute_statistics

from .filters import (
    FilterCriteria,
    parse_criticality,
    matches,
    filter_forest,
    filter_list,
)

from .expansion import ExpansionState
from .selection import SelectionState

from .session import (
    ComponentRepository,
    ComponentSession,
)


__all__ = [
    # Enums
    "CriticalityFilter",
    "SessionStatus",
    "ConditionStatus",
    "ComponentTab",
    # Schema
    "ROOT_PARENT_ID",
    "Component",
    "TreeNode",
    "ComponentStatistics",
    "VesselSummary",
    # Errors
    "ComponentErrorCategory",
    "ComponentErrorSeverity",
    "ComponentError",
    "ComponentFetchError",
    "InvalidFilterError",
    "ComponentNotFoundError",
    "error_response",
    # Running hours
    "MS_PER_HOUR",
    "now_ms",
    "parse_epoch_ms",
    "hours",
    "annotate_running_hours",
    # Tree
    "build_forest",
    "iter_nodes",
    "count_nodes",
    "find_node",
    "parent_node_ids",
    # Statistics
    "compute_statistics",
    # Filters
    "FilterCriteria",
    "parse_criticality",
    "matches",
    "filter_forest",
    "filter_list",
    # State
    "ExpansionState",
    "SelectionState",
    # Session
    "ComponentRepository",
    "ComponentSession",
]

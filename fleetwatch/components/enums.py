"""
components/enums.py - Component engine enumerations.
"""

from enum import Enum


class CriticalityFilter(Enum):
    """Criticality toggle applied to tree and inventory."""
    ALL = "all"
    CRITICAL = "critical"
    NOT_CRITICAL = "not_critical"


class SessionStatus(Enum):
    """Component session lifecycle."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ConditionStatus(Enum):
    """Normalized last-condition value, drives the status badge."""
    NORMAL = "normal"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class ComponentTab(Enum):
    """Which list the dashboard is showing."""
    INSTALLED = "installed"   # mounted tree
    INVENTORY = "inventory"   # unmounted flat list

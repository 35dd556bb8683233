"""
components/schema.py - Component engine data model.

Defines the flat equipment record served per vessel, the tree node the
hierarchy is rebuilt into, and the summary counts shown above the tree.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


# Parent id meaning "no parent / root"
ROOT_PARENT_ID = 0

REFERENCE_FIELDS = (
    "manufacturer",
    "vendor",
    "location",
    "department",
    "component_type",
    "owning_type",
)


# =============================================================================
# COMPONENT RECORD
# =============================================================================

@dataclass
class Component:
    """One equipment item scoped to a vessel."""

    # Identity
    id: int = 0
    vessel_id: str = ""

    # Hierarchy and placement
    parent_component_id: int = ROOT_PARENT_ID
    is_mounted: bool = False

    # Descriptive
    name: str = ""
    serial_number: str = ""
    asset_code: str = ""
    main_spec: str = ""
    installation_desc: str = ""
    remarks: str = ""
    class_code: str = ""
    image_path: str = ""

    # Condition
    last_condition: str = ""
    last_condition_date: str = ""   # epoch milliseconds as served
    running_hours: int = 0          # derived, see running_hours.py

    # Classification flags
    is_critical: bool = False
    critical_desc: str = ""
    critical_level: str = ""
    is_major_component: bool = False
    is_circulating_component: bool = False
    is_grouped_component: bool = False
    is_component_lending: bool = False

    # Read-only joined references
    manufacturer: Optional[Dict[str, Any]] = None
    vendor: Optional[Dict[str, Any]] = None
    location: Optional[Dict[str, Any]] = None
    department: Optional[Dict[str, Any]] = None
    component_type: Optional[Dict[str, Any]] = None
    owning_type: Optional[Dict[str, Any]] = None

    @property
    def is_root_reference(self) -> bool:
        """True when the record declares no parent."""
        return self.parent_component_id == ROOT_PARENT_ID

    def reference_name(self, reference: str) -> str:
        """Name of a joined reference object, or empty string."""
        if reference not in REFERENCE_FIELDS:
            raise ValueError(f"Unknown reference: {reference}")
        ref = getattr(self, reference)
        if not ref:
            return ""
        return str(ref.get("name") or "")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Component":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# =============================================================================
# TREE NODE
# =============================================================================

@dataclass
class TreeNode:
    """A mounted component plus its ordered children."""

    component: Component
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.component.id

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict of the subtree, built without recursion."""
        data = self.component.to_dict()
        data["children"] = []
        visited = {id(self)}
        stack = [(self, data)]
        while stack:
            node, node_data = stack.pop()
            for child in node.children:
                if id(child) in visited:
                    continue
                visited.add(id(child))
                child_data = child.component.to_dict()
                child_data["children"] = []
                node_data["children"].append(child_data)
                stack.append((child, child_data))
        return data


# =============================================================================
# STATISTICS
# =============================================================================

@dataclass(frozen=True)
class ComponentStatistics:
    """Summary counts over the full, unfiltered record list."""

    total: int = 0
    mounted: int = 0
    inventory: int = 0
    critical: int = 0
    normal: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "mounted": self.mounted,
            "inventory": self.inventory,
            "critical": self.critical,
            "normal": self.normal,
        }


# =============================================================================
# VESSEL
# =============================================================================

@dataclass(frozen=True)
class VesselSummary:
    """Entry of the fleet list used for vessel selection."""

    id: str
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}

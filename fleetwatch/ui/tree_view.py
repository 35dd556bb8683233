"""
ui/tree_view.py - Installed-component tree projection.

Flattens a (filtered) forest into the rows a tree widget draws, honoring
the expansion state, and renders them as plain text for the CLI.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..components.display import format_running_hours
from ..components.expansion import ExpansionState
from ..components.schema import Component, TreeNode

INDENT = "    "


@dataclass
class TreeRow:
    """One drawn line of the tree."""

    node: TreeNode
    depth: int
    expanded: bool
    selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.node.id,
            "name": self.node.component.name,
            "depth": self.depth,
            "has_children": self.node.has_children,
            "expanded": self.expanded,
            "selected": self.selected,
        }


def visible_rows(
    forest: Iterable[TreeNode],
    expansion: ExpansionState,
    selected_id: Optional[int] = None,
) -> List[TreeRow]:
    """
    Rows in display order.

    A node's children are listed only when the node is expanded.
    """
    rows: List[TreeRow] = []
    visited = set()
    stack: List[Tuple[TreeNode, int]] = [(node, 0) for node in reversed(list(forest))]

    while stack:
        node, depth = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        expanded = node.has_children and expansion.is_expanded(node.id)
        rows.append(TreeRow(
            node=node,
            depth=depth,
            expanded=expanded,
            selected=selected_id is not None and node.id == selected_id,
        ))
        if expanded:
            stack.extend((child, depth + 1) for child in reversed(node.children))

    return rows


def _describe(component: Component) -> str:
    parts = [component.name or f"#{component.id}"]
    if component.asset_code:
        parts.append(f"({component.asset_code})")
    if component.is_critical:
        parts.append("[CRITICAL]")
    parts.append(f"- {component.last_condition or 'Unknown'}")
    parts.append(f"- {format_running_hours(component.running_hours)}")
    return " ".join(parts)


def render_ascii(rows: Iterable[TreeRow]) -> str:
    """Render rows as text, one line per row."""
    lines = []
    for row in rows:
        if not row.node.has_children:
            marker = " "
        elif row.expanded:
            marker = "v"
        else:
            marker = ">"
        cursor = "*" if row.selected else " "
        lines.append(f"{cursor}{INDENT * row.depth}{marker} {_describe(row.node.component)}")
    return "\n".join(lines)


def render_inventory(items: Iterable[Component]) -> str:
    """Render inventory records as text, one line per record."""
    lines = []
    for item in items:
        serial = f" {item.serial_number}" if item.serial_number else ""
        lines.append(f"  {_describe(item)}{serial}")
    return "\n".join(lines)

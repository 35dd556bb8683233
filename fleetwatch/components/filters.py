"""
components/filters.py - Search and criticality filtering.

Two views are filtered with the same per-record predicate:

- The installed forest, with ancestor preservation: a node is kept when it
  matches or when at least one of its children survives filtering. A kept
  node only carries its surviving children, whether or not it matched
  itself.
- The inventory list, record by record.

Both functions are pure: the input forest is never mutated and the
result is built from fresh nodes sharing the original records.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Set, Union

from .enums import CriticalityFilter
from .errors import InvalidFilterError
from .schema import Component, TreeNode


SEARCH_FIELDS = ("name", "serial_number", "asset_code")


@dataclass(frozen=True)
class FilterCriteria:
    """Search text (case-insensitive substring) and criticality toggle."""

    search_text: str = ""
    criticality: CriticalityFilter = CriticalityFilter.ALL

    @property
    def is_identity(self) -> bool:
        """True when the criteria let every record through."""
        return self.search_text == "" and self.criticality == CriticalityFilter.ALL

    def to_dict(self):
        return {
            "search_text": self.search_text,
            "criticality": self.criticality.value,
        }


def parse_criticality(value: Union[str, CriticalityFilter]) -> CriticalityFilter:
    """Accept an enum member or its string value."""
    if isinstance(value, CriticalityFilter):
        return value
    try:
        return CriticalityFilter(value)
    except ValueError:
        raise InvalidFilterError(value, [c.value for c in CriticalityFilter]) from None


# =============================================================================
# PREDICATES
# =============================================================================

def matches_search(component: Component, search_text: str) -> bool:
    if search_text == "":
        return True
    needle = search_text.lower()
    return any(needle in (getattr(component, f) or "").lower() for f in SEARCH_FIELDS)


def matches_criticality(component: Component, criticality: CriticalityFilter) -> bool:
    if criticality == CriticalityFilter.CRITICAL:
        return bool(component.is_critical)
    if criticality == CriticalityFilter.NOT_CRITICAL:
        return not component.is_critical
    return True


def matches(component: Component, criteria: FilterCriteria) -> bool:
    """Per-record predicate shared by tree and inventory filtering."""
    return (
        matches_search(component, criteria.search_text)
        and matches_criticality(component, criteria.criticality)
    )


# =============================================================================
# FILTERS
# =============================================================================

def filter_forest(forest: Iterable[TreeNode], criteria: FilterCriteria) -> List[TreeNode]:
    """
    Ancestor-preserving filter over a forest.

    Post-order walk with an explicit stack, so hierarchy depth is not
    bounded by the interpreter's recursion limit.

    Args:
        forest: Root nodes (left untouched)
        criteria: Filter to apply

    Returns:
        New root nodes; a non-matching ancestor is kept with only the
        branches that lead to matches
    """
    kept_roots: List[TreeNode] = []
    on_path: Set[int] = set()
    # Frames: [node, index of next child to visit, surviving children]
    stack: List[list] = []

    for root in forest:
        stack.append([root, 0, []])
        on_path.add(id(root))

        while stack:
            frame = stack[-1]
            node, index, kept = frame

            if index < len(node.children):
                frame[1] = index + 1
                child = node.children[index]
                # A node reached again through its own descendants is not descended into
                if id(child) not in on_path:
                    on_path.add(id(child))
                    stack.append([child, 0, []])
                continue

            stack.pop()
            on_path.discard(id(node))
            if kept or matches(node.component, criteria):
                filtered = TreeNode(component=node.component, children=kept)
                if stack:
                    stack[-1][2].append(filtered)
                else:
                    kept_roots.append(filtered)

    return kept_roots


def filter_list(items: Iterable[Component], criteria: FilterCriteria) -> List[Component]:
    """Flat filter for inventory; no hierarchy involved."""
    return [item for item in items if matches(item, criteria)]

"""
components/tree_builder.py - Flat record list to component forest.

Two passes over the mounted records: create one node per record and index
it by id, then attach every node to its parent in input order. Records
whose parent is 0, missing, or unmounted become roots (orphan promotion).
Children and roots keep the relative order of the input list.

The parent relation is not guaranteed to be acyclic. Before attaching,
each cycle is broken by promoting the cycle member that appears first in
the input list, so every mounted record ends up in the forest exactly once.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Sequence
import logging

from .schema import Component, TreeNode

logger = logging.getLogger("components.tree_builder")

# Walk states for cycle detection
_UNVISITED = 0
_ON_PATH = 1
_DONE = 2


def build_forest(components: Iterable[Component]) -> List[TreeNode]:
    """
    Build the installed-equipment forest.

    Args:
        components: Flat records of one vessel; unmounted ones are ignored

    Returns:
        Ordered root nodes
    """
    mounted = [c for c in components if c.is_mounted]
    nodes = [TreeNode(component=c) for c in mounted]

    # Later duplicates win the index
    position_by_id: Dict[int, int] = {c.id: i for i, c in enumerate(mounted)}

    parents: List[Optional[int]] = []
    for component in mounted:
        if component.is_root_reference:
            parents.append(None)
            continue
        parent_pos = position_by_id.get(component.parent_component_id)
        if parent_pos is None:
            logger.debug(
                f"Component {component.id} references missing parent "
                f"{component.parent_component_id}, promoted to root"
            )
        parents.append(parent_pos)

    _break_cycles(mounted, parents)

    roots: List[TreeNode] = []
    for pos, node in enumerate(nodes):
        parent_pos = parents[pos]
        if parent_pos is None:
            roots.append(node)
        else:
            nodes[parent_pos].children.append(node)

    return roots


def _break_cycles(mounted: Sequence[Component], parents: List[Optional[int]]) -> None:
    """Promote one member of every parent cycle to root, in place."""
    state = [_UNVISITED] * len(parents)

    for start in range(len(parents)):
        if state[start] != _UNVISITED:
            continue

        path: List[int] = []
        current: Optional[int] = start
        while current is not None and state[current] == _UNVISITED:
            state[current] = _ON_PATH
            path.append(current)
            current = parents[current]

        if current is not None and state[current] == _ON_PATH:
            cycle = path[path.index(current):]
            promoted = min(cycle)
            parents[promoted] = None
            logger.warning(
                f"Cyclic parent references among components "
                f"{[mounted[p].id for p in cycle]}, promoted {mounted[promoted].id} to root"
            )

        for pos in path:
            state[pos] = _DONE


# =============================================================================
# TRAVERSAL
# =============================================================================

def iter_nodes(forest: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """
    Pre-order traversal of a forest.

    Nodes already visited (by identity) are skipped without descending,
    so a hand-built cyclic structure cannot loop forever.
    """
    visited = set()
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        yield node
        stack.extend(reversed(node.children))


def count_nodes(forest: Iterable[TreeNode]) -> int:
    """Total number of nodes in a forest, all levels."""
    return sum(1 for _ in iter_nodes(forest))


def find_node(forest: Iterable[TreeNode], component_id: int) -> Optional[TreeNode]:
    """First node with the given component id, or None."""
    for node in iter_nodes(forest):
        if node.id == component_id:
            return node
    return None


def parent_node_ids(forest: Iterable[TreeNode]) -> List[int]:
    """Ids of every node that has at least one child, in pre-order."""
    return [node.id for node in iter_nodes(forest) if node.has_children]

"""
components/expansion.py - Expanded-node bookkeeping for the tree view.

Expansion only decides whether a node's children are rendered. It never
affects which nodes exist; building and filtering ignore it.
"""

from __future__ import annotations
from typing import FrozenSet, Iterable, Set

from .schema import TreeNode
from .tree_builder import parent_node_ids


class ExpansionState:
    """Set of component ids whose children are shown."""

    def __init__(self):
        self._expanded: Set[int] = set()

    @property
    def expanded_ids(self) -> FrozenSet[int]:
        return frozenset(self._expanded)

    def is_expanded(self, node_id: int) -> bool:
        return node_id in self._expanded

    def toggle(self, node_id: int) -> bool:
        """
        Flip a node's membership.

        Returns:
            True if the node is expanded afterwards
        """
        if node_id in self._expanded:
            self._expanded.discard(node_id)
            return False
        self._expanded.add(node_id)
        return True

    def expand_all(self, forest: Iterable[TreeNode]) -> None:
        """
        Expand every node with children.

        Callers pass the unfiltered forest so the result does not depend
        on the current search.
        """
        self._expanded = set(parent_node_ids(forest))

    def collapse_all(self) -> None:
        self._expanded.clear()

    def reset(self) -> None:
        """Empty the set on vessel change."""
        self._expanded.clear()

    def __len__(self) -> int:
        return len(self._expanded)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._expanded

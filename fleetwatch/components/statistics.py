"""
components/statistics.py - Summary counts for the component dashboard.

Always computed over the full record list; search and criticality filters
never change these numbers.
"""

from __future__ import annotations
from typing import Iterable

from .schema import Component, ComponentStatistics

NORMAL_CONDITION = "Normal"


def compute_statistics(components: Iterable[Component]) -> ComponentStatistics:
    """Count total, mounted, inventory, critical and normal records."""
    total = mounted = critical = normal = 0
    for component in components:
        total += 1
        if component.is_mounted:
            mounted += 1
        if component.is_critical:
            critical += 1
        if component.last_condition == NORMAL_CONDITION:
            normal += 1

    return ComponentStatistics(
        total=total,
        mounted=mounted,
        inventory=total - mounted,
        critical=critical,
        normal=normal,
    )

"""
components/display.py - Presentation helpers for component views.

Small formatting rules shared by the tree, the inventory list and the
detail panel.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict

from .enums import ComponentTab, ConditionStatus
from .running_hours import parse_epoch_ms
from .schema import Component

# Presigned S3 links expire, the detail panel does not show them
PRESIGNED_URL_MARKER = "?X-Amz"

CONDITION_BADGES: Dict[ConditionStatus, str] = {
    ConditionStatus.NORMAL: "green",
    ConditionStatus.CRITICAL: "red",
    ConditionStatus.UNKNOWN: "gray",
}


def condition_status(last_condition: str) -> ConditionStatus:
    """Map a free-text condition to a badge category, case-insensitively."""
    value = (last_condition or "").strip().lower()
    if value == "normal":
        return ConditionStatus.NORMAL
    if value == "critical":
        return ConditionStatus.CRITICAL
    return ConditionStatus.UNKNOWN


def condition_badge(last_condition: str) -> str:
    return CONDITION_BADGES[condition_status(last_condition)]


def format_condition_date(timestamp: Any) -> str:
    """Format epoch milliseconds as e.g. 'Mar 5, 2024' (UTC); '' if unparsable."""
    ms = parse_epoch_ms(timestamp)
    if ms is None:
        return ""
    try:
        date = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return ""
    return f"{date:%b} {date.day}, {date.year}"


def format_running_hours(running_hours: int) -> str:
    return f"{running_hours:,} hrs"


def has_displayable_image(component: Component) -> bool:
    path = component.image_path or ""
    return bool(path) and PRESIGNED_URL_MARKER not in path


def empty_state_message(tab: ComponentTab, has_active_filters: bool, vessel_name: str) -> str:
    """Message shown when the active list has no rows."""
    if tab == ComponentTab.INSTALLED:
        if has_active_filters:
            return "No components match your current filters."
        return f"No installed components for {vessel_name}."
    if has_active_filters:
        return "No items match your current filters."
    return f"No items in inventory for {vessel_name}."


def component_detail(component: Component) -> Dict[str, Any]:
    """Fields shown by the detail panel, formatted."""
    return {
        "id": component.id,
        "name": component.name,
        "condition": component.last_condition,
        "condition_status": condition_status(component.last_condition).value,
        "condition_date": format_condition_date(component.last_condition_date),
        "running_hours": format_running_hours(component.running_hours),
        "is_mounted": component.is_mounted,
        "is_critical": component.is_critical,
        "critical_level": component.critical_level,
        "serial_number": component.serial_number,
        "asset_code": component.asset_code,
        "main_spec": component.main_spec,
        "class_code": component.class_code,
        "manufacturer": component.reference_name("manufacturer"),
        "vendor": component.reference_name("vendor"),
        "location": component.reference_name("location"),
        "department": component.reference_name("department"),
        "component_type": component.reference_name("component_type"),
        "image_path": component.image_path if has_displayable_image(component) else "",
    }

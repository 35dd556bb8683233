"""
tests/unit/test_display.py - Tests for component presentation helpers.
"""

from fleetwatch.components import ComponentTab, ConditionStatus
from fleetwatch.components.display import (
    component_detail,
    condition_badge,
    condition_status,
    empty_state_message,
    format_condition_date,
    format_running_hours,
    has_displayable_image,
)
from tests.conftest import make_component, NOW_MS


class TestConditionStatus:
    """Tests for condition badge mapping."""

    def test_known_values_case_insensitive(self):
        assert condition_status("Normal") == ConditionStatus.NORMAL
        assert condition_status(" CRITICAL ") == ConditionStatus.CRITICAL

    def test_other_values_unknown(self):
        assert condition_status("Degraded") == ConditionStatus.UNKNOWN
        assert condition_status("") == ConditionStatus.UNKNOWN
        assert condition_status(None) == ConditionStatus.UNKNOWN

    def test_badges(self):
        assert condition_badge("normal") == "green"
        assert condition_badge("critical") == "red"
        assert condition_badge("Overdue") == "gray"


class TestFormatting:
    """Tests for date and hours formatting."""

    def test_condition_date(self):
        assert format_condition_date(NOW_MS) == "Nov 14, 2023"
        assert format_condition_date(str(NOW_MS)) == "Nov 14, 2023"

    def test_condition_date_unparsable(self):
        assert format_condition_date("") == ""
        assert format_condition_date("yesterday") == ""
        assert format_condition_date(None) == ""

    def test_running_hours(self):
        assert format_running_hours(0) == "0 hrs"
        assert format_running_hours(12345) == "12,345 hrs"


class TestImages:
    """Tests for image visibility."""

    def test_plain_path_shown(self):
        assert has_displayable_image(make_component(1, image_path="https://cdn.example.com/pump.jpg"))

    def test_presigned_url_hidden(self):
        component = make_component(1, image_path="https://bucket.s3.amazonaws.com/p.jpg?X-Amz-Signature=abc")
        assert not has_displayable_image(component)

    def test_missing_path(self):
        assert not has_displayable_image(make_component(1))


class TestEmptyStateMessage:
    """Tests for empty list messages."""

    def test_installed(self):
        assert empty_state_message(ComponentTab.INSTALLED, False, "MV Aurora") == (
            "No installed components for MV Aurora."
        )
        assert empty_state_message(ComponentTab.INSTALLED, True, "MV Aurora") == (
            "No components match your current filters."
        )

    def test_inventory(self):
        assert empty_state_message(ComponentTab.INVENTORY, False, "MV Aurora") == (
            "No items in inventory for MV Aurora."
        )
        assert empty_state_message(ComponentTab.INVENTORY, True, "MV Aurora") == (
            "No items match your current filters."
        )


class TestComponentDetail:
    """Tests for the detail panel projection."""

    def test_detail_fields(self):
        component = make_component(
            7,
            name="Fuel Pump",
            last_condition="Critical",
            last_condition_date=str(NOW_MS),
            running_hours=1500,
            manufacturer={"id": 3, "name": "MAN Energy"},
            location={"name": "Engine Room"},
            image_path="https://x/y.png?X-Amz-Date=1",
        )

        detail = component_detail(component)

        assert detail["name"] == "Fuel Pump"
        assert detail["condition_status"] == "critical"
        assert detail["condition_date"] == "Nov 14, 2023"
        assert detail["running_hours"] == "1,500 hrs"
        assert detail["manufacturer"] == "MAN Energy"
        assert detail["location"] == "Engine Room"
        assert detail["vendor"] == ""
        assert detail["image_path"] == ""

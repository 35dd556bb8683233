"""
Fleetwatch Test Configuration and Fixtures

Shared record factories and in-memory repositories for the component
engine tests.
"""

import asyncio
from typing import Dict, List

import pytest

from fleetwatch.components import Component, ComponentFetchError
from fleetwatch.ui.events import event_bus


HOUR_MS = 3_600_000
NOW_MS = 1_700_000_000_000


def make_component(
    id: int,
    parent: int = 0,
    mounted: bool = True,
    name: str = "",
    **kwargs,
) -> Component:
    """Component with the fields most tests care about."""
    return Component(
        id=id,
        parent_component_id=parent,
        is_mounted=mounted,
        name=name or f"Component {id}",
        **kwargs,
    )


def make_chain(depth: int) -> List[Component]:
    """Single mounted branch: 1 -> 2 -> ... -> depth."""
    return [make_component(i, parent=i - 1 if i > 1 else 0) for i in range(1, depth + 1)]


class FakeRepository:
    """Repository returning canned records per vessel."""

    def __init__(self, records: Dict[str, List[Component]] = None):
        self.records = records or {}
        self.calls: List[str] = []
        self.fail_with: Dict[str, str] = {}

    async def fetch_by_vessel(self, vessel_id: str) -> List[Component]:
        self.calls.append(vessel_id)
        if vessel_id in self.fail_with:
            raise ComponentFetchError(vessel_id, self.fail_with[vessel_id])
        return list(self.records.get(vessel_id, []))


class GatedRepository:
    """Repository whose responses are released by the test."""

    def __init__(self):
        self._pending: Dict[str, List[asyncio.Future]] = {}
        self.calls: List[str] = []

    async def fetch_by_vessel(self, vessel_id: str) -> List[Component]:
        self.calls.append(vessel_id)
        future = asyncio.get_running_loop().create_future()
        self._pending.setdefault(vessel_id, []).append(future)
        return await future

    def release(self, vessel_id: str, records: List[Component]) -> None:
        self._pending[vessel_id].pop(0).set_result(list(records))

    def fail(self, vessel_id: str, reason: str = "boom") -> None:
        self._pending[vessel_id].pop(0).set_exception(ComponentFetchError(vessel_id, reason))


@pytest.fixture
def worked_example() -> List[Component]:
    """Engine -> Piston mounted, SpareValve in inventory."""
    return [
        make_component(1, parent=0, mounted=True, name="Engine"),
        make_component(2, parent=1, mounted=True, name="Piston"),
        make_component(3, parent=1, mounted=False, name="SpareValve"),
    ]


@pytest.fixture
def fleet_records() -> List[Component]:
    """A small vessel: two systems, a critical leaf and inventory items."""
    return [
        make_component(10, name="Main Engine", asset_code="ME-01", serial_number="SN-100",
                       last_condition="Normal", last_condition_date=str(NOW_MS - 5 * HOUR_MS)),
        make_component(11, parent=10, name="Turbocharger", asset_code="ME-TC", serial_number="TC-7",
                       is_critical=True, last_condition="Critical"),
        make_component(12, parent=10, name="Fuel Pump", asset_code="ME-FP", serial_number="FP-2",
                       last_condition="Normal"),
        make_component(13, parent=11, name="Turbine Blade", asset_code="TB-1", serial_number="BL-9",
                       is_critical=True),
        make_component(20, name="Steering Gear", asset_code="SG-01", serial_number="SG-55"),
        make_component(21, parent=20, name="Rudder Actuator", asset_code="SG-RA"),
        make_component(30, mounted=False, name="Spare Fuel Pump", asset_code="SP-FP",
                       serial_number="FP-3", last_condition="Normal"),
        make_component(31, parent=10, mounted=False, name="Spare Turbocharger",
                       asset_code="SP-TC", is_critical=True),
    ]


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Sessions without their own bus share the module-level one."""
    event_bus.clear()
    yield event_bus
    event_bus.clear()

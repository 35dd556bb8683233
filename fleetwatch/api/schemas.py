"""
api/schemas.py - Pydantic wire models for the component API

Validates the JSON envelope returned by the components-by-vessel endpoint
and converts each record into a Component. Nullable strings and flags are
normalized so the engine never sees None for them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..components.schema import Component, ROOT_PARENT_ID


# =============================================================================
# Component Records
# =============================================================================


class ComponentPayload(BaseModel):
    """One component as served by the API (snake_case fields)."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Component id, unique within a vessel")
    vessel_id: Optional[Union[str, int]] = Field(None, description="Owning vessel")
    parent_component_id: Optional[int] = Field(ROOT_PARENT_ID, description="0 for roots")
    is_mounted: Optional[bool] = False

    name: Optional[str] = None
    serial_number: Optional[str] = None
    asset_code: Optional[str] = None
    main_spec: Optional[str] = None
    installation_desc: Optional[str] = None
    remarks: Optional[str] = None
    class_code: Optional[str] = None
    image_path: Optional[str] = None

    last_condition: Optional[str] = None
    last_condition_date: Optional[Union[str, int]] = Field(
        None, description="Epoch milliseconds"
    )

    is_critical: Optional[bool] = False
    critical_desc: Optional[str] = None
    critical_level: Optional[str] = None
    is_major_component: Optional[bool] = False
    is_circulating_component: Optional[bool] = False
    is_grouped_component: Optional[bool] = False
    is_component_lending: Optional[bool] = False

    original_manufacturer: Optional[Dict[str, Any]] = None
    vendor: Optional[Dict[str, Any]] = None
    location: Optional[Dict[str, Any]] = None
    department: Optional[Dict[str, Any]] = None
    component_type: Optional[Dict[str, Any]] = None
    owning_type: Optional[Dict[str, Any]] = None

    @field_validator("parent_component_id")
    @classmethod
    def _parent_default(cls, value: Optional[int]) -> int:
        return ROOT_PARENT_ID if value is None else value

    def to_component(self) -> Component:
        """Convert to the engine's record type."""
        return Component(
            id=self.id,
            vessel_id="" if self.vessel_id is None else str(self.vessel_id),
            parent_component_id=self.parent_component_id,
            is_mounted=bool(self.is_mounted),
            name=self.name or "",
            serial_number=self.serial_number or "",
            asset_code=self.asset_code or "",
            main_spec=self.main_spec or "",
            installation_desc=self.installation_desc or "",
            remarks=self.remarks or "",
            class_code=self.class_code or "",
            image_path=self.image_path or "",
            last_condition=self.last_condition or "",
            last_condition_date="" if self.last_condition_date is None else str(self.last_condition_date),
            is_critical=bool(self.is_critical),
            critical_desc=self.critical_desc or "",
            critical_level=self.critical_level or "",
            is_major_component=bool(self.is_major_component),
            is_circulating_component=bool(self.is_circulating_component),
            is_grouped_component=bool(self.is_grouped_component),
            is_component_lending=bool(self.is_component_lending),
            manufacturer=self.original_manufacturer,
            vendor=self.vendor,
            location=self.location,
            department=self.department,
            component_type=self.component_type,
            owning_type=self.owning_type,
        )


class ComponentListResponse(BaseModel):
    """Envelope of the components-by-vessel endpoint."""

    model_config = ConfigDict(extra="ignore")

    code: int = 200
    status: str = ""
    data: List[ComponentPayload] = Field(default_factory=list)

    def to_components(self) -> List[Component]:
        return [item.to_component() for item in self.data]


# =============================================================================
# Router Request Models
# =============================================================================


class SelectVesselRequest(BaseModel):
    """Body of POST /components/vessel."""

    vessel_id: str = Field(..., min_length=1)


class FilterRequest(BaseModel):
    """Body of PUT /components/filters; omitted fields keep their value."""

    search_text: Optional[str] = None
    criticality: Optional[str] = None

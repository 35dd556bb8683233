"""
api/ - Remote component API client and HTTP surface

- schemas: pydantic models for the components-by-vessel payload
- auth: credential header providers
- client: httpx-based ComponentRepository
- endpoints: FastAPI router over a ComponentSession
"""

from .schemas import (
    ComponentPayload,
    ComponentListResponse,
    SelectVesselRequest,
    FilterRequest,
)

from .auth import (
    AuthHeaderProvider,
    StaticAuthHeaders,
)

from .client import HttpComponentRepository


__all__ = [
    # Schemas
    "ComponentPayload",
    "ComponentListResponse",
    "SelectVesselRequest",
    "FilterRequest",
    # Auth
    "AuthHeaderProvider",
    "StaticAuthHeaders",
    # Client
    "HttpComponentRepository",
]

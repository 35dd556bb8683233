"""
api/endpoints.py - REST API routes for the component dashboard

FastAPI router exposing one ComponentSession to a web front end: vessel
selection, retry, filters, expansion, selection and the derived views.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, FastAPI, HTTPException

from ..components.display import component_detail, empty_state_message
from ..components.enums import ComponentTab
from ..components.errors import ComponentNotFoundError, InvalidFilterError, error_response
from ..components.session import ComponentSession
from .schemas import FilterRequest, SelectVesselRequest

__all__ = [
    "create_components_router",
    "create_app",
]

logger = logging.getLogger("api.endpoints")


# =============================================================================
# ROUTER FACTORY
# =============================================================================

def create_components_router(session: ComponentSession) -> APIRouter:
    """
    Create FastAPI router for component endpoints.

    Args:
        session: Session the endpoints read and mutate

    Returns:
        APIRouter mounted under /components
    """
    router = APIRouter(prefix="/components", tags=["components"])

    # =========================================================================
    # VIEWS
    # =========================================================================

    @router.get("/state")
    async def get_state() -> Dict[str, Any]:
        """Session status, criteria, expansion, selection and counts."""
        return session.get_summary()

    @router.get("/forest")
    async def get_forest() -> Dict[str, Any]:
        """Filtered installed forest."""
        forest = session.get_forest()
        response: Dict[str, Any] = {
            "vessel_id": session.vessel_id,
            "roots": [node.to_dict() for node in forest],
        }
        if not forest:
            response["message"] = empty_state_message(
                ComponentTab.INSTALLED, session.has_active_filters, session.selected_vessel_name,
            )
        return response

    @router.get("/inventory")
    async def get_inventory() -> Dict[str, Any]:
        """Filtered unmounted records."""
        items = session.get_inventory()
        return {
            "vessel_id": session.vessel_id,
            "items": [item.to_dict() for item in items],
            "count": len(items),
        }

    @router.get("/statistics")
    async def get_statistics() -> Dict[str, int]:
        """Counts over the full, unfiltered list."""
        return session.get_statistics().to_dict()

    @router.get("/detail/{component_id}")
    async def get_component(component_id: int) -> Dict[str, Any]:
        """Formatted detail panel for one component."""
        try:
            component = session.get_component(component_id)
        except ComponentNotFoundError as e:
            raise HTTPException(status_code=404, detail=error_response(e))
        return component_detail(component)

    # =========================================================================
    # VESSEL AND FETCH
    # =========================================================================

    @router.post("/vessel")
    async def select_vessel(request: SelectVesselRequest) -> Dict[str, Any]:
        """Switch vessel; resets view state and loads its components."""
        applied = await session.select_vessel(request.vessel_id)
        return {"applied": applied, **session.get_summary()}

    @router.post("/retry")
    async def retry() -> Dict[str, Any]:
        """Fetch the current vessel again, keeping the view state."""
        if session.vessel_id is None:
            raise HTTPException(status_code=409, detail="No vessel selected")
        applied = await session.retry()
        return {"applied": applied, **session.get_summary()}

    # =========================================================================
    # FILTERS
    # =========================================================================

    @router.put("/filters")
    async def set_filters(request: FilterRequest) -> Dict[str, Any]:
        """Update search text and/or criticality."""
        try:
            if request.criticality is not None:
                session.set_criticality_filter(request.criticality)
        except InvalidFilterError as e:
            raise HTTPException(status_code=400, detail=error_response(e))
        if request.search_text is not None:
            session.set_search_text(request.search_text)
        return session.criteria.to_dict()

    # =========================================================================
    # EXPANSION AND SELECTION
    # =========================================================================

    @router.post("/expansion/toggle/{node_id}")
    async def toggle_node(node_id: int) -> Dict[str, Any]:
        expanded = session.toggle(node_id)
        return {"node_id": node_id, "expanded": expanded}

    @router.post("/expansion/expand-all")
    async def expand_all() -> Dict[str, List[int]]:
        session.expand_all()
        return {"expanded_ids": sorted(session.expansion.expanded_ids)}

    @router.post("/expansion/collapse-all")
    async def collapse_all() -> Dict[str, List[int]]:
        session.collapse_all()
        return {"expanded_ids": []}

    @router.post("/selection/{component_id}")
    async def select_component(component_id: int) -> Dict[str, Optional[int]]:
        session.select(component_id)
        return {"selected_id": session.selection.selected_id}

    @router.delete("/selection")
    async def clear_selection() -> Dict[str, Optional[int]]:
        session.clear_selection()
        return {"selected_id": None}

    return router


# =============================================================================
# APPLICATION
# =============================================================================

def create_app(session: ComponentSession) -> FastAPI:
    """
    Create FastAPI application serving one component session.

    Args:
        session: Session backing the /components routes

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Fleetwatch API",
        description="Vessel component hierarchy dashboard API",
        version="1.0.0",
    )
    app.include_router(create_components_router(session))
    logger.info("Components router wired successfully")
    return app

"""
components/errors.py - Component engine error taxonomy.

Only fetch failures, invalid filter values and unknown component lookups
are raised. Malformed timestamps, dangling parent references and stale
responses are recovered where they occur and only logged; their
categories are listed here so logs and event payloads share one vocabulary.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class ComponentErrorCategory(Enum):
    """Categories of component engine errors."""
    FETCH = "fetch_failure"                    # Repository call failed
    FILTER = "invalid_filter"                  # Unknown filter value
    LOOKUP = "component_not_found"             # Id not in current record set
    MALFORMED_TIMESTAMP = "malformed_timestamp"  # Recovered: running hours = 0
    DANGLING_PARENT = "dangling_parent"        # Recovered: orphan promotion
    STALE_RESPONSE = "stale_response"          # Recovered: response discarded


class ComponentErrorSeverity(Enum):
    """Severity levels for component errors."""
    ERROR = "error"       # Operation failed, user may retry
    WARNING = "warning"   # Request rejected, state unchanged


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class ComponentError(Exception):
    """
    Base class for component engine errors.

    Carries an error code, a recovery hint for the user and free-form
    details for debugging.
    """

    code: str = "COMP_000"
    category: ComponentErrorCategory = ComponentErrorCategory.FETCH
    severity: ComponentErrorSeverity = ComponentErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        vessel_id: str = "",
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Component error"
        self.vessel_id = vessel_id
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "vessel_id": self.vessel_id,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.vessel_id:
            parts.append(f"(vessel: {self.vessel_id})")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class ComponentFetchError(ComponentError):
    """Fetching the component list failed."""

    code = "COMP_001"
    category = ComponentErrorCategory.FETCH
    severity = ComponentErrorSeverity.ERROR

    def __init__(
        self,
        vessel_id: str,
        reason: str,
        status_code: Optional[int] = None,
        **kwargs,
    ):
        message = f"Failed to fetch components for vessel {vessel_id}: {reason}"
        super().__init__(
            message=message,
            vessel_id=vessel_id,
            recovery_hint="Check your connection and retry.",
            reason=reason,
            status_code=status_code,
            **kwargs,
        )
        self.status_code = status_code


class InvalidFilterError(ComponentError, ValueError):
    """Unknown filter value."""

    code = "COMP_002"
    category = ComponentErrorCategory.FILTER
    severity = ComponentErrorSeverity.WARNING

    def __init__(self, value: Any, allowed: Any, **kwargs):
        message = f"Invalid criticality filter {value!r}"
        super().__init__(
            message=message,
            recovery_hint=f"Use one of: {', '.join(allowed)}.",
            value=value,
            allowed=list(allowed),
            **kwargs,
        )


class ComponentNotFoundError(ComponentError, KeyError):
    """Component id not present in the current record set."""

    code = "COMP_003"
    category = ComponentErrorCategory.LOOKUP
    severity = ComponentErrorSeverity.WARNING

    def __init__(self, component_id: int, vessel_id: str = "", **kwargs):
        message = f"Component {component_id} not found"
        super().__init__(
            message=message,
            vessel_id=vessel_id,
            recovery_hint="Reload the vessel's components.",
            component_id=component_id,
            **kwargs,
        )
        self.component_id = component_id

    # KeyError.__str__ would repr() the message
    __str__ = ComponentError.__str__


# =============================================================================
# ERROR RESPONSE HELPERS
# =============================================================================

def error_response(error: ComponentError) -> Dict[str, Any]:
    """Convert ComponentError to API response format."""
    return {
        "error": error.to_dict(),
    }

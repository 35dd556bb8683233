"""
tests/unit/test_errors.py - Tests for the component error taxonomy.
"""

import pytest

from fleetwatch.components.errors import (
    ComponentError,
    ComponentErrorCategory,
    ComponentErrorSeverity,
    ComponentFetchError,
    ComponentNotFoundError,
    InvalidFilterError,
    error_response,
)


class TestComponentFetchError:
    """Tests for ComponentFetchError."""

    def test_fields(self):
        error = ComponentFetchError("V1", "API error: 503", status_code=503)

        assert error.code == "COMP_001"
        assert error.vessel_id == "V1"
        assert error.status_code == 503
        assert error.details["reason"] == "API error: 503"
        assert "retry" in error.recovery_hint

    def test_str(self):
        error = ComponentFetchError("V1", "timeout")
        assert str(error) == "[COMP_001] Failed to fetch components for vessel V1: timeout (vessel: V1)"


class TestInvalidFilterError:
    """Tests for InvalidFilterError."""

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidFilterError("bogus", ["all", "critical"])

    def test_details(self):
        error = InvalidFilterError("bogus", ("all", "critical", "not_critical"))

        assert error.category == ComponentErrorCategory.FILTER
        assert error.severity == ComponentErrorSeverity.WARNING
        assert error.details == {"value": "bogus", "allowed": ["all", "critical", "not_critical"]}


class TestComponentNotFoundError:
    """Tests for ComponentNotFoundError."""

    def test_is_key_error(self):
        with pytest.raises(KeyError):
            raise ComponentNotFoundError(9, vessel_id="V1")

    def test_str_not_quoted(self):
        error = ComponentNotFoundError(9)
        assert str(error) == "[COMP_003] Component 9 not found"
        assert error.component_id == 9


class TestErrorResponse:
    """Tests for API error payloads."""

    def test_error_response(self):
        payload = error_response(ComponentNotFoundError(9, vessel_id="V1"))

        assert payload["error"]["code"] == "COMP_003"
        assert payload["error"]["category"] == "component_not_found"
        assert payload["error"]["details"] == {"component_id": 9}

    def test_base_defaults(self):
        error = ComponentError()
        assert "Base class for component engine errors" in error.message
        assert error.to_dict()["vessel_id"] == ""

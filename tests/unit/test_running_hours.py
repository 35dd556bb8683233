"""
tests/unit/test_running_hours.py - Tests for running hours derivation.
"""

import pytest

from fleetwatch.components import hours, annotate_running_hours, parse_epoch_ms, MS_PER_HOUR
from tests.conftest import make_component, NOW_MS


class TestHours:
    """Tests for hours()."""

    def test_same_instant_is_zero(self):
        assert hours(NOW_MS, NOW_MS) == 0

    def test_one_hour(self):
        assert hours(NOW_MS - 3_600_000, NOW_MS) == 1

    def test_floors_partial_hours(self):
        """Test 1h59m counts as one hour."""
        assert hours(NOW_MS - (2 * MS_PER_HOUR - 60_000), NOW_MS) == 1

    def test_future_timestamp_clamped(self):
        assert hours(NOW_MS + 1000, NOW_MS) == 0

    def test_numeric_string(self):
        """Test timestamps served as strings."""
        assert hours(str(NOW_MS - 48 * MS_PER_HOUR), NOW_MS) == 48

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", None, "nan", [], {}])
    def test_unparsable_is_zero(self, value):
        assert hours(value, NOW_MS) == 0


class TestParseEpochMs:
    """Tests for timestamp parsing."""

    def test_int_passthrough(self):
        assert parse_epoch_ms(123) == 123

    def test_float_string(self):
        assert parse_epoch_ms("1.7e12") == 1_700_000_000_000

    def test_bool_rejected(self):
        assert parse_epoch_ms(True) is None

    def test_infinite_rejected(self):
        assert parse_epoch_ms("inf") is None


class TestAnnotate:
    """Tests for annotate_running_hours()."""

    def test_annotates_copies(self):
        """Test records get derived hours and originals stay untouched."""
        original = make_component(1, last_condition_date=str(NOW_MS - 10 * MS_PER_HOUR))
        broken = make_component(2, last_condition_date="not-a-date", running_hours=99)

        annotated = annotate_running_hours([original, broken], NOW_MS)

        assert [c.running_hours for c in annotated] == [10, 0]
        assert original.running_hours == 0
        assert broken.running_hours == 99
        assert annotated[0] is not original

    def test_never_negative(self):
        records = [make_component(i, last_condition_date=str(NOW_MS + i * MS_PER_HOUR)) for i in range(5)]
        assert all(c.running_hours == 0 for c in annotate_running_hours(records, NOW_MS))

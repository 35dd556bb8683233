"""
components/running_hours.py - Running hours derivation.

Running hours are the whole hours elapsed since the last recorded
condition check. The value is never negative and never raises: future
or unparsable timestamps yield 0.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional
import logging

from .schema import Component

logger = logging.getLogger("components.running_hours")

MS_PER_HOUR = 3_600_000


def now_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def parse_epoch_ms(value: Any) -> Optional[int]:
    """
    Parse an epoch-millisecond timestamp as served by the API.

    Returns:
        Milliseconds, or None if the value cannot be interpreted
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else None  # NaN
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        if parsed != parsed or parsed in (float("inf"), float("-inf")):
            return None
        return int(parsed)
    return None


def hours(last_condition_date_ms: Any, now: int) -> int:
    """
    Whole hours elapsed between a timestamp and now.

    Args:
        last_condition_date_ms: Epoch milliseconds (int or numeric string)
        now: Current epoch milliseconds

    Returns:
        floor(elapsed / 1h), clamped to 0 for future or unparsable input
    """
    start = parse_epoch_ms(last_condition_date_ms)
    if start is None:
        logger.debug(f"Malformed timestamp {last_condition_date_ms!r}, running hours clamped to 0")
        return 0

    elapsed = now - start
    if elapsed < 0:
        return 0
    return elapsed // MS_PER_HOUR


def annotate_running_hours(components: Iterable[Component], now: int) -> List[Component]:
    """Return copies of the records with running_hours derived from now."""
    return [
        replace(component, running_hours=hours(component.last_condition_date, now))
        for component in components
    ]

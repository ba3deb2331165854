from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import DAY_NAMES
from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Default clock of the data manager and dashboard; tests pass a fixed
    ``clock=`` or ``now=`` instead.
    """
    return datetime.now()


def weekday_number(day: date) -> int:
    """Weekday with Sunday=1 .. Saturday=7."""
    return day.isoweekday() % 7 + 1


def weekday_name(day: date) -> str:
    return DAY_NAMES[weekday_number(day)]


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    v = (value or "").strip()
    try:
        return datetime.strptime(v, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")

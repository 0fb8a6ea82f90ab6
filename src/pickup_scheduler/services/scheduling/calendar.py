"""Calendar arithmetic for the local scheduling calendar."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from ...models.domain import TIME_SLOTS

WEEKDAY_LABELS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def weekday_index(value: datetime) -> int:
    """Weekday with Sunday = 0 and Saturday = 6."""
    return (value.weekday() + 1) % 7


def weekday_label(index: int) -> str:
    return WEEKDAY_LABELS[index % 7]


def start_of_week(value: datetime) -> datetime:
    """Monday 00:00 of the week containing ``value``."""
    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=value.weekday())


def week_window(value: datetime) -> tuple[datetime, datetime]:
    start = start_of_week(value)
    return start, start + timedelta(days=7)


def hours_between(a: datetime, b: datetime) -> float:
    return abs((a - b).total_seconds()) / 3600.0


def resolve_time_slot(day: date, slot: str) -> datetime:
    """Combine a calendar day with the start hour of a collection slot."""
    try:
        hour = TIME_SLOTS[slot]
    except KeyError as exc:
        raise ValueError(f"Unknown time slot '{slot}'. Expected one of: {', '.join(TIME_SLOTS)}") from exc
    return datetime.combine(day, time(hour=hour))


def local_today(tz_name: Optional[str] = None) -> date:
    """Current calendar day in ``tz_name``, or in the host timezone when unset."""
    if not tz_name:
        return datetime.now().date()
    return datetime.now(ZoneInfo(tz_name)).date()


def to_local(value: datetime, tz_name: Optional[str] = None) -> datetime:
    """Express ``value`` as naive wall-clock time in ``tz_name``.

    Naive values are assumed to already be local.
    """
    if value.tzinfo is None or not tz_name:
        return value.replace(tzinfo=None)
    return value.astimezone(ZoneInfo(tz_name)).replace(tzinfo=None)

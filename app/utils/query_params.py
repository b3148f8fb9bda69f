"""
Lenient query-string parsing shared by the dashboard routers and the
fixture repositories.

Dashboard filters never produce a 4xx: values that cannot be parsed fall
back to the endpoint default.
"""

import math
from datetime import UTC, datetime, timedelta

# Call-stats scaling applied to the fixture tenant's weekly counters.
TIME_FILTER_MULTIPLIERS: dict[str, float] = {
    "hour": 0.1,
    "today": 0.3,
    "two_days": 0.5,
    "week": 1.0,
}
DEFAULT_TIME_FILTER = "week"

PERIOD_WINDOWS: dict[str, timedelta | None] = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
    "year": timedelta(days=365),
    "all": None,
}

RESERVATION_PERIODS = ("today", "week", "month")

NOTIFICATION_WINDOWS: dict[str, timedelta] = {
    "day": timedelta(days=1),
    "two_days": timedelta(days=2),
    "three_days": timedelta(days=3),
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}


def parse_positive_int(value: str | None, default: int) -> int:
    """Parse a strictly positive integer, falling back to ``default``."""
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def parse_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive counters (2.5 -> 3)."""
    return math.floor(value + 0.5)


def time_filter_multiplier(time_filter: str | None) -> float:
    return TIME_FILTER_MULTIPLIERS.get(time_filter or "", TIME_FILTER_MULTIPLIERS[DEFAULT_TIME_FILTER])


def time_filter_window(time_filter: str | None, now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    Return ``(start, end)`` of the call window selected by ``timeFilter``.

    Unknown or missing filters select the trailing week.
    """
    now = now or datetime.now(UTC)
    if time_filter == "hour":
        return now - timedelta(hours=1), now
    if time_filter == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0), now
    if time_filter == "two_days":
        return now - timedelta(days=2), now
    return now - timedelta(days=7), now


def normalize_period(period: str | None, default: str = "month") -> str:
    return period if period in PERIOD_WINDOWS else default


def period_start(period: str | None, now: datetime | None = None, default: str = "month") -> datetime | None:
    """Lower bound for a ``period`` filter, ``None`` for ``all``."""
    window = PERIOD_WINDOWS[normalize_period(period, default)]
    if window is None:
        return None
    return (now or datetime.now(UTC)) - window


def reservation_period_start(period: str | None, now: datetime | None = None) -> datetime:
    now = now or datetime.now(UTC)
    if period == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "month":
        return now - timedelta(days=30)
    return now - timedelta(days=7)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def percent_change(current: float, previous: float) -> float:
    """Variation between two periods, rounded to one decimal."""
    if previous == 0:
        return 0.0 if current == 0 else 100.0
    return round((current - previous) / previous * 100, 1)

"""
Calendar Arithmetic

Cycle numbers are ``iso_year * 100 + iso_week`` in the configured timezone.
Consecutiveness must go through are_adjacent(): plain subtraction breaks at the
year boundary (202452 -> 202501).
"""

from datetime import UTC, date, datetime, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo


def to_local(instant: datetime, timezone: str) -> datetime:
    """Convert an instant to the given zone; naive datetimes are read as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(ZoneInfo(timezone))


def to_naive_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(UTC).replace(tzinfo=None)


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def cycle_id(instant: datetime, timezone: str) -> int:
    iso_year, iso_week, _ = to_local(instant, timezone).isocalendar()
    return iso_year * 100 + iso_week


def split_cycle_id(cycle_number: int) -> Tuple[int, int]:
    """Return ``(year, week)`` for a cycle number."""
    return divmod(cycle_number, 100)


def iso_weeks_in_year(year: int) -> int:
    # Dec 28 always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def are_adjacent(previous: Optional[int], current: int) -> bool:
    """True iff ``current`` is the cycle immediately following ``previous``."""
    if previous is None:
        return False

    prev_year, prev_week = split_cycle_id(previous)
    cur_year, cur_week = split_cycle_id(current)

    if prev_year == cur_year:
        return cur_week == prev_week + 1

    if cur_year == prev_year + 1:
        return cur_week == 1 and prev_week == iso_weeks_in_year(prev_year)

    return False


def window_bounds(
    now: datetime,
    timezone: str,
    open_weekday: int,
    open_hour: int,
    close_weekday: int,
    close_hour: int,
) -> Tuple[datetime, datetime]:
    """
    Compute the submission window for the ISO week containing ``now``.

    Args:
        now: Current instant (naive = UTC)
        timezone: IANA zone the day/hour offsets are expressed in
        open_weekday: 0=Monday ... 6=Sunday
        open_hour: Hour of day the window opens
        close_weekday: 0=Monday ... 6=Sunday
        close_hour: Hour of day submissions are due

    Returns:
        ``(opens_at, deadline)`` as naive UTC datetimes. The deadline is the
        first close day/hour after the opening, pushed one week forward when it
        is already behind ``now``.
    """
    local_now = to_local(now, timezone)
    zone = local_now.tzinfo

    week_start = local_now.date() - timedelta(days=local_now.weekday())
    open_day = week_start + timedelta(days=open_weekday)
    opens_at = datetime(open_day.year, open_day.month, open_day.day, open_hour, tzinfo=zone)

    days_until_close = (close_weekday - open_weekday) % 7
    if days_until_close == 0 and close_hour <= open_hour:
        days_until_close = 7
    close_day = open_day + timedelta(days=days_until_close)
    deadline = datetime(close_day.year, close_day.month, close_day.day, close_hour, tzinfo=zone)

    while deadline <= local_now:
        deadline = deadline + timedelta(days=7)

    return to_naive_utc(opens_at), to_naive_utc(deadline)

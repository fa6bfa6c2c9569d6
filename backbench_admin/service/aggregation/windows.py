"""
Time windows used to bucket redemptions.

Windows:
- today: from local midnight of the current calendar date
- week: the trailing 7x24 hours ending now

Both are lower bounds only and overlap: anything in ``today`` is also in
``week``.
"""

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from typing import Any, Optional

WEEK = timedelta(days=7)


@dataclass(frozen=True)
class TimeWindows:
    """Lower bounds of the reporting buckets, all timezone-aware."""

    now: datetime
    today_start: datetime
    week_start: datetime

    def in_today(self, moment: datetime) -> bool:
        return moment >= self.today_start

    def in_week(self, moment: datetime) -> bool:
        return moment >= self.week_start


def to_aware(moment: datetime) -> datetime:
    """Attach the server's local timezone to a naive datetime."""
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


def build_windows(now: Optional[datetime] = None) -> TimeWindows:
    """
    Build the reporting windows relative to ``now``.

    Args:
        now: Reference instant, defaults to the current time

    Returns:
        TimeWindows with today's local midnight and now minus 7 days
    """
    now = to_aware(now) if now is not None else datetime.now().astimezone()

    local_now = now.astimezone()
    today_start = datetime.combine(local_now.date(), time.min).astimezone()

    return TimeWindows(
        now=now,
        today_start=today_start,
        week_start=now - WEEK,
    )


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a ``redeemed_at``-style value into an aware datetime.

    Date-only strings are midnight UTC; other strings without an offset
    and naive datetimes are local time.

    Returns:
        The instant, or None when the value is missing or unparseable
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return to_aware(value)

    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None

    if len(text) == 10:
        return parsed.replace(tzinfo=timezone.utc)

    return to_aware(parsed)

"""Time-zone aware date helpers.

Everything here works on explicit instants and an explicit IANA zone; the host
machine's local time zone is never consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class DayBoundaries:
    """First and last instant (UTC) of one local calendar day."""

    start_utc: datetime
    end_utc: datetime
    iso_date: str

    @property
    def day(self) -> date:
        return date.fromisoformat(self.iso_date)


@lru_cache(maxsize=None)
def get_zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def to_utc(value: datetime) -> datetime:
    """Normalize to an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    """ISO-8601 UTC string with milliseconds, e.g. ``2025-09-26T00:00:00.000Z``."""
    return to_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError("Invalid date (YYYY-MM-DD)") from None


def local_midnight_utc(day: date, zone: str = DEFAULT_TIMEZONE) -> datetime:
    return datetime.combine(day, time.min, tzinfo=get_zone(zone)).astimezone(timezone.utc)


def get_day_boundaries(reference: datetime, zone: str = DEFAULT_TIMEZONE) -> DayBoundaries:
    """Local day containing ``reference`` in ``zone``, as UTC start/end instants."""
    local = to_utc(reference).astimezone(get_zone(zone))
    day = local.date()
    start = local_midnight_utc(day, zone)
    # Next local midnight minus 1 ms, so a 23- or 25-hour day still ends right.
    end = local_midnight_utc(day + timedelta(days=1), zone) - _ONE_MS
    return DayBoundaries(start_utc=start, end_utc=end, iso_date=day.isoformat())


def local_today(reference: datetime, zone: str = DEFAULT_TIMEZONE) -> date:
    return get_day_boundaries(reference, zone).day

"""
Calendar helpers shared by order filtering and aggregation.

Timestamps are compared in the timezone of the reference instant ("now").
Naive datetimes are taken to already be in that timezone.
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo

END_OF_DAY = time(23, 59, 59, 999000)


def to_local(moment: datetime, tz: tzinfo | None) -> datetime:
    """Express moment in tz (or in naive local time when tz is None)."""
    if tz is None:
        if moment.tzinfo is None:
            return moment
        return moment.astimezone().replace(tzinfo=None)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def start_of(bound: date, tz: tzinfo | None) -> datetime:
    """First instant of a bound: datetimes as given, dates at local midnight."""
    if isinstance(bound, datetime):
        return to_local(bound, tz)
    return datetime.combine(bound, time.min, tzinfo=tz)


def end_of_day(bound: date, tz: tzinfo | None) -> datetime:
    """Last millisecond (23:59:59.999) of the bound's calendar day."""
    day = to_local(bound, tz).date() if isinstance(bound, datetime) else bound
    return datetime.combine(day, END_OF_DAY, tzinfo=tz)

"""Day, week and month views over the event store."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterable

from .models import CanonicalEvent


def _start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def week_bounds(day: date) -> tuple[datetime, datetime]:
    """Monday through Sunday of the week containing ``day``."""
    if isinstance(day, datetime):
        day = day.date()
    monday = day - timedelta(days=day.weekday())
    return datetime.combine(monday, time.min), datetime.combine(monday + timedelta(days=6), time.max)


def month_bounds(day: date) -> tuple[datetime, datetime]:
    if isinstance(day, datetime):
        day = day.date()
    last_day = calendar.monthrange(day.year, day.month)[1]
    return (
        datetime.combine(day.replace(day=1), time.min),
        datetime.combine(day.replace(day=last_day), time.max),
    )


def event_overlaps(event: CanonicalEvent, interval_start: datetime, interval_end: datetime) -> bool:
    if event.start_time is None:
        if event.submission_date is None:
            return False
        return interval_start <= event.submission_date <= interval_end

    event_end = event.end_time or event.start_time
    return _start_of_day(event.start_time) <= interval_end and _start_of_day(event_end) >= interval_start


def _ascending_key(event: CanonicalEvent) -> tuple[bool, datetime]:
    if event.start_time is None:
        return True, datetime.min
    return False, event.start_time


def query_interval(
    events: Iterable[CanonicalEvent],
    interval_start: datetime,
    interval_end: datetime,
) -> list[CanonicalEvent]:
    """Events touching ``[interval_start, interval_end]``, earliest first.

    Events without a start time sort last and keep their store order.
    """
    matches = [event for event in events if event_overlaps(event, interval_start, interval_end)]
    matches.sort(key=_ascending_key)
    return matches


def events_for_day(events: Iterable[CanonicalEvent], day: date) -> list[CanonicalEvent]:
    return query_interval(events, *day_bounds(day))


def events_for_week(events: Iterable[CanonicalEvent], day: date) -> list[CanonicalEvent]:
    return query_interval(events, *week_bounds(day))


def events_for_month(events: Iterable[CanonicalEvent], day: date) -> list[CanonicalEvent]:
    return query_interval(events, *month_bounds(day))

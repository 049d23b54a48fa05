"""Projections of canonical events for external storage and calendars."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from icalendar import Calendar, Event

from .constants import DEFAULT_CALENDAR_NAME, PROD_ID
from .models import CanonicalEvent


def to_storage_row(event: CanonicalEvent) -> dict[str, Any]:
    """Snake_case row for the ``agenda_events`` table."""
    return {
        "id": event.id,
        "sei_number": event.sei_number or None,
        "submission_date": event.submission_date_text,
        "title": event.title,
        "requester": event.requester,
        "location": event.location,
        "focal_point": event.focal_point,
        "start_time": event.start_time_text,
        "end_time": event.end_time_text,
        "situation": event.situation or None,
        "daily_sei_number": event.daily_sei_number or None,
        "description": event.description or None,
        "participants": event.participants or None,
        "type": event.type or None,
    }


def to_storage_rows(events: Iterable[CanonicalEvent]) -> list[dict[str, Any]]:
    return [to_storage_row(event) for event in events]


def _build_calendar(name: str) -> Calendar:
    calendar = Calendar()
    calendar.add("prodid", PROD_ID)
    calendar.add("version", "2.0")
    calendar.add("calscale", "GREGORIAN")
    calendar.add("x-wr-calname", name)
    return calendar


def _ical_event(event: CanonicalEvent, stamp: datetime) -> Event:
    component = Event()
    component.add("uid", event.id)
    component.add("summary", event.title)
    component.add("dtstart", event.start_time)
    component.add("dtend", event.end_time)
    component.add("dtstamp", stamp)
    if event.location:
        component.add("location", event.location)
    details = [
        f"Solicitante: {event.requester}" if event.requester else None,
        f"Ponto focal: {event.focal_point}" if event.focal_point else None,
        f"SEI: {event.sei_number}" if event.sei_number else None,
        event.description,
    ]
    description = "\n".join(line for line in details if line)
    if description:
        component.add("description", description)
    component.add("categories", [event.type])
    if event.situation:
        component.add("status", "CANCELLED" if event.situation.startswith("CANCELADO") else "CONFIRMED")
    return component


def to_icalendar(events: Iterable[CanonicalEvent], name: Optional[str] = None) -> Calendar:
    """Calendar with every event that has resolved times.

    Times are written as floating local times, matching how they are stored.
    """
    calendar = _build_calendar(name or DEFAULT_CALENDAR_NAME)
    stamp = datetime.now(tz=timezone.utc)
    for event in events:
        if event.has_times:
            calendar.add_component(_ical_event(event, stamp))
    return calendar

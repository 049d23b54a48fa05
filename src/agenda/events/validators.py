"""Validation and parameter helpers for agenda operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from .constants import DEFAULT_EVENT_TYPE
from .errors import AgendaValidationError
from .models import EVENT_FIELDS, FilterCriteria

_DERIVED_FIELDS = {"id", "submission_date", "start_time", "end_time", "date_status"}
UPDATABLE_TEXT_FIELDS = frozenset(EVENT_FIELDS - _DERIVED_FIELDS)


@dataclass(frozen=True)
class EventCreateParams:
    title: str
    requester: str
    location: str
    focal_point: str
    submission_date: Optional[date | datetime]
    event_date: Optional[date]
    sei_number: Optional[str] = None
    situation: Optional[str] = None
    daily_sei_number: Optional[str] = None
    description: Optional[str] = None
    participants: Optional[str] = None
    type: Optional[str] = None


def validate_event_id(event_id: str) -> str:
    if not event_id or not isinstance(event_id, str):
        raise AgendaValidationError("Event id is required", field="id", value=event_id)
    return event_id


def _validate_optional_date(value: Any, field: str) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    raise AgendaValidationError(f"{field} must be a date", field=field, value=value)


def _validate_optional_text(value: Any, field: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise AgendaValidationError(f"{field} must be text", field=field, value=value)


def parse_date_value(value: str, field: str = "date") -> date:
    """Parse an ISO 8601 date (a datetime is accepted and truncated)."""
    if not value:
        raise AgendaValidationError("Date value is required", field=field)
    try:
        return date.fromisoformat(value)
    except ValueError:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as exc:
            raise AgendaValidationError(
                "Invalid date format. Use YYYY-MM-DD",
                field=field,
                value=value,
            ) from exc


def validate_create_params(
    title: str,
    requester: str,
    location: str,
    focal_point: str,
    submission_date: Optional[date | datetime],
    event_date: Optional[date],
    **optional: Optional[str],
) -> EventCreateParams:
    unknown = set(optional) - {
        "sei_number",
        "situation",
        "daily_sei_number",
        "description",
        "participants",
        "type",
    }
    if unknown:
        raise AgendaValidationError(
            f"Unknown event field(s): {', '.join(sorted(unknown))}",
            field="fields",
            value=sorted(unknown),
        )
    for name, value in {"title": title, "requester": requester, "location": location, "focal_point": focal_point}.items():
        _validate_optional_text(value, name)
    for name, value in optional.items():
        _validate_optional_text(value, name)
    _validate_optional_date(submission_date, "submission_date")
    _validate_optional_date(event_date, "event_date")

    event_type = optional.pop("type", None) or DEFAULT_EVENT_TYPE
    return EventCreateParams(
        title=title,
        requester=requester,
        location=location,
        focal_point=focal_point,
        submission_date=submission_date,
        event_date=event_date,
        type=event_type,
        **optional,
    )


def validate_update_fields(fields: dict[str, Any]) -> dict[str, Optional[str]]:
    unknown = set(fields) - UPDATABLE_TEXT_FIELDS
    if unknown:
        raise AgendaValidationError(
            f"Field(s) cannot be updated: {', '.join(sorted(unknown))}",
            field="fields",
            value=sorted(unknown),
        )
    for name, value in fields.items():
        _validate_optional_text(value, name)
    return dict(fields)


def validate_filter_criteria(
    sei_number: Optional[str] = None,
    action_type: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    situation: Optional[str] = None,
    focal_point: Optional[str] = None,
    location: Optional[str] = None,
) -> FilterCriteria:
    texts = {
        "sei_number": sei_number,
        "action_type": action_type,
        "situation": situation,
        "focal_point": focal_point,
        "location": location,
    }
    cleaned = {name: _clean(_validate_optional_text(value, name)) for name, value in texts.items()}
    start = _validate_optional_date(start_date, "start_date")
    end = _validate_optional_date(end_date, "end_date")
    return FilterCriteria(start_date=start, end_date=end, **cleaned)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None

"""Agenda operations over an explicit event store."""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Optional

import structlog

from .config import load_config
from .errors import AgendaDataError, AgendaValidationError
from .filters import filter_events as _filter_events
from .models import CanonicalEvent, DateStatus, FilterCriteria, RawEventRecord
from .normalizer import event_times, new_event_id, normalize, submission_timestamp
from .queries import events_for_day, events_for_month, events_for_week
from .store import EventStore
from .validators import EventCreateParams, validate_event_id, validate_update_fields

logger = structlog.get_logger()

_UNSET: Any = object()


def read_raw_records(path: Path) -> list[RawEventRecord]:
    if not path.exists():
        raise AgendaDataError("Event data file not found", path=str(path))
    if path.is_dir():
        raise AgendaDataError("Event data path is a directory", path=str(path))
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise AgendaDataError("Unable to read event data file", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise AgendaDataError(f"Invalid event data file: {exc.msg}", path=str(path)) from exc
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise AgendaDataError("Event data file must contain a list of records", path=str(path))
    return [RawEventRecord.from_mapping(item) for item in data]


def load_initial_data(
    store: EventStore,
    records: Iterable[RawEventRecord],
    today: Optional[date] = None,
    policy: Optional[str] = None,
    placeholder_months: Optional[int] = None,
) -> list[CanonicalEvent]:
    if policy is None or placeholder_months is None:
        config = load_config()
        policy = policy or config.unparseable_policy
        placeholder_months = config.placeholder_months if placeholder_months is None else placeholder_months
    events = [
        normalize(record, today=today, policy=policy, placeholder_months=placeholder_months)
        for record in records
    ]
    store.load(events)
    return events


def get_events_for_day(store: EventStore, day: date) -> list[CanonicalEvent]:
    return events_for_day(store, day)


def get_events_for_week(store: EventStore, day: date) -> list[CanonicalEvent]:
    return events_for_week(store, day)


def get_events_for_month(store: EventStore, day: date) -> list[CanonicalEvent]:
    return events_for_month(store, day)


def get_event(store: EventStore, event_id: str) -> Optional[CanonicalEvent]:
    return store.find_by_id(validate_event_id(event_id))


def filter_events(store: EventStore, criteria: FilterCriteria) -> list[CanonicalEvent]:
    if not isinstance(criteria, FilterCriteria):
        raise AgendaValidationError("Criteria must be a FilterCriteria", field="criteria", value=criteria)
    return _filter_events(store, criteria)


def create_event(store: EventStore, params: EventCreateParams) -> CanonicalEvent:
    start_time, end_time = event_times(params.event_date)
    event = CanonicalEvent(
        id=new_event_id(),
        sei_number=params.sei_number,
        submission_date=submission_timestamp(params.submission_date),
        title=params.title,
        requester=params.requester,
        location=params.location,
        focal_point=params.focal_point,
        start_time=start_time,
        end_time=end_time,
        situation=params.situation,
        daily_sei_number=params.daily_sei_number,
        description=params.description,
        participants=params.participants,
        type=params.type,
        date_status=DateStatus.RESOLVED if start_time else DateStatus.INDETERMINATE,
    )
    store.insert(event)
    logger.info("event_created", event_id=event.id, title=event.title)
    return event


def update_event(
    store: EventStore,
    event_id: str,
    *,
    submission_date: Optional[date | datetime] = _UNSET,
    event_date: Optional[date] = _UNSET,
    **fields: Optional[str],
) -> Optional[CanonicalEvent]:
    """Merge changes into an event, re-deriving its dates.

    For ``submission_date`` and ``event_date``, ``None`` clears the value and
    omitting the argument keeps the stored one. ``type`` only changes when a
    non-empty value is given.
    """
    validate_event_id(event_id)
    changes: dict[str, Any] = validate_update_fields(fields)
    if not changes.get("type"):
        changes.pop("type", None)

    if submission_date is not _UNSET:
        if submission_date is not None and not isinstance(submission_date, date):
            raise AgendaValidationError("submission_date must be a date", field="submission_date", value=submission_date)
        changes["submission_date"] = submission_timestamp(submission_date)

    if event_date is not _UNSET:
        if event_date is not None and not isinstance(event_date, date):
            raise AgendaValidationError("event_date must be a date", field="event_date", value=event_date)
        start_time, end_time = event_times(event_date)
        changes["start_time"] = start_time
        changes["end_time"] = end_time
        changes["date_status"] = DateStatus.RESOLVED if start_time else DateStatus.INDETERMINATE

    updated = store.update_by_id(event_id, changes)
    if updated is None:
        logger.info("event_update_missing", event_id=event_id)
    else:
        logger.info("event_updated", event_id=event_id, fields=sorted(changes))
    return updated


def delete_event(store: EventStore, event_id: str) -> bool:
    deleted = store.delete_by_id(validate_event_id(event_id))
    logger.info("event_delete", event_id=event_id, deleted=deleted)
    return deleted

"""Agenda event normalization and retrieval."""

from .calendar import (
    create_event,
    delete_event,
    filter_events,
    get_event,
    get_events_for_day,
    get_events_for_month,
    get_events_for_week,
    load_initial_data,
    read_raw_records,
    update_event,
)
from .config import AgendaConfig, default_data_path, load_config, resolve_data_path
from .errors import AgendaConfigError, AgendaDataError, AgendaError, AgendaValidationError, format_error_for_user
from .export import to_icalendar, to_storage_row, to_storage_rows
from .models import CanonicalEvent, DateStatus, FilterCriteria, RawEventRecord
from .normalizer import normalize
from .parser import DateSpan, is_indeterminate, parse_phrase
from .store import EventStore
from .validators import EventCreateParams, parse_date_value, validate_create_params, validate_filter_criteria

__all__ = [
    "create_event",
    "delete_event",
    "filter_events",
    "get_event",
    "get_events_for_day",
    "get_events_for_month",
    "get_events_for_week",
    "load_initial_data",
    "read_raw_records",
    "update_event",
    "AgendaConfig",
    "default_data_path",
    "load_config",
    "resolve_data_path",
    "AgendaConfigError",
    "AgendaDataError",
    "AgendaError",
    "AgendaValidationError",
    "format_error_for_user",
    "to_icalendar",
    "to_storage_row",
    "to_storage_rows",
    "CanonicalEvent",
    "DateStatus",
    "FilterCriteria",
    "RawEventRecord",
    "normalize",
    "DateSpan",
    "is_indeterminate",
    "parse_phrase",
    "EventStore",
    "EventCreateParams",
    "parse_date_value",
    "validate_create_params",
    "validate_filter_criteria",
]

"""Criteria-based event search."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Callable, Iterable, Optional

from .constants import ALL_ACTION_TYPES, ALL_SITUATIONS
from .models import CanonicalEvent, FilterCriteria

Predicate = Callable[[CanonicalEvent], bool]

_NON_DIGITS_RE = re.compile(r"\D")


def _digits(value: str) -> str:
    return _NON_DIGITS_RE.sub("", value)


def _disabled(value: Optional[str], wildcards: set[str]) -> bool:
    return not value or value.strip().casefold() in wildcards


def _sei_predicate(sei_number: str) -> Predicate:
    wanted = _digits(sei_number)
    return lambda event: event.sei_number is not None and wanted in _digits(event.sei_number)


def _date_predicate(start_date: Optional[date], end_date: Optional[date]) -> Predicate:
    lower = datetime.combine(start_date, time.min) if start_date else None
    upper = datetime.combine(end_date, time.max) if end_date else None

    def matches(event: CanonicalEvent) -> bool:
        point = event.effective_date
        if point is None:
            return False
        day = datetime.combine(point.date(), time.min)
        if lower is not None and day < lower:
            return False
        if upper is not None and day > upper:
            return False
        return True

    return matches


def _text_equals(attribute: str, wanted: str) -> Predicate:
    wanted = wanted.casefold()
    return lambda event: (getattr(event, attribute) or "").casefold() == wanted


def _text_contains(attribute: str, wanted: str) -> Predicate:
    wanted = wanted.casefold()
    return lambda event: wanted in (getattr(event, attribute) or "").casefold()


def build_predicates(criteria: FilterCriteria) -> list[Predicate]:
    predicates: list[Predicate] = []
    if criteria.sei_number:
        predicates.append(_sei_predicate(criteria.sei_number))
    if not _disabled(criteria.action_type, ALL_ACTION_TYPES):
        predicates.append(_text_equals("type", criteria.action_type))
    if criteria.start_date or criteria.end_date:
        predicates.append(_date_predicate(criteria.start_date, criteria.end_date))
    if not _disabled(criteria.situation, ALL_SITUATIONS):
        predicates.append(_text_equals("situation", criteria.situation))
    if criteria.focal_point:
        predicates.append(_text_contains("focal_point", criteria.focal_point))
    if criteria.location:
        predicates.append(_text_contains("location", criteria.location))
    return predicates


def _descending_key(event: CanonicalEvent) -> tuple[bool, datetime]:
    point = event.effective_date
    if point is None:
        return False, datetime.min
    return True, point


def filter_events(events: Iterable[CanonicalEvent], criteria: FilterCriteria) -> list[CanonicalEvent]:
    """Events matching every given criterion, newest first."""
    predicates = build_predicates(criteria)
    matches = [event for event in events if all(predicate(event) for predicate in predicates)]
    matches.sort(key=_descending_key, reverse=True)
    return matches

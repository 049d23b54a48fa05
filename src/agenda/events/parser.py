"""Free-text date phrase parsing.

Source records carry hand-transcribed Portuguese date descriptions such as
``"17, 18 e 19/03/2025"``, ``"Março/25 A definir"`` or ``"2025-02-12 00:00:00"``.
``parse_phrase`` resolves them to a start/end calendar date pair, trying each
rule below in order and stopping at the first match:

1. indeterminate markers ("a definir", "preferencialmente", "entre os dias"),
   resolved to the 15th only when the phrase starts with ``<Month>/<year>``
2. a single absolute date
3. a list or range of days within one month
4. ``<Month>/<year>`` on its own, resolved to the 15th
5. anything else is unparseable and logs a warning

Spans resolved to the 15th carry ``approximate=True``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import structlog

from .constants import APPROXIMATE_DAY, MONTH_ABBREVIATIONS, MONTH_NAMES

logger = structlog.get_logger()

_INDETERMINATE_RE = re.compile(r"a definir|preferencialmente|entre os dias", re.IGNORECASE)
_MONTH_YEAR_PREFIX_RE = re.compile(
    rf"^(?P<month>{'|'.join(MONTH_NAMES)})/(?P<year>\d{{2,4}})",
    re.IGNORECASE,
)
_ABSOLUTE_FORMATS = ("%d/%m/%Y", "%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S")
_SHORT_YEAR_SLASH_RE = re.compile(r"^(?P<day>\d{1,2})/(?P<month>\d{1,2})/\d{1,3}$")
_DAY_SEPARATOR = r"(?:\s*,\s*|\s+(?:e|a)\s+|\s+)"
_PART_SEPARATOR = r"\s*(?:/|\s+de\s+)\s*"
_DAY_RANGE_RE = re.compile(
    rf"^(?P<days>\d{{1,2}}(?:{_DAY_SEPARATOR}\d{{1,2}})*)"
    rf"{_PART_SEPARATOR}(?P<month>\d{{1,2}}|[^\W\d_]+)"
    rf"(?:{_PART_SEPARATOR}(?P<year>\d{{4}}|\d{{2}}))?$",
    re.IGNORECASE,
)
_MONTH_YEAR_RE = re.compile(
    rf"^(?P<month>[^\W\d_]+){_PART_SEPARATOR}(?P<year>\d{{2,4}})(?:\s+a definir)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DateSpan:
    start: Optional[date]
    end: Optional[date]
    approximate: bool = False

    @property
    def resolved(self) -> bool:
        return self.start is not None


UNRESOLVED = DateSpan(start=None, end=None)


def is_indeterminate(text: str) -> bool:
    return _INDETERMINATE_RE.search(text or "") is not None


def month_from_name(name: str) -> Optional[int]:
    """Return the 1-based month for a Portuguese month name or abbreviation."""
    prefix = name.strip().lower()[:3]
    if len(prefix) < 3:
        return None
    for index, abbreviation in enumerate(MONTH_ABBREVIATIONS):
        if abbreviation.startswith(prefix):
            return index + 1
    return None


def _expand_year(token: str) -> int:
    year = int(token)
    return 2000 + year if len(token) == 2 else year


def _approximate(month_name: str, year_token: str) -> Optional[DateSpan]:
    month = month_from_name(month_name)
    if month is None:
        return None
    try:
        approx = date(_expand_year(year_token), month, APPROXIMATE_DAY)
    except ValueError:
        return None
    return DateSpan(start=approx, end=approx, approximate=True)


def _parse_absolute(text: str, reference_year: int) -> Optional[date]:
    for fmt in _ABSOLUTE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    match = _SHORT_YEAR_SLASH_RE.match(text)
    if match:
        try:
            return date(reference_year, int(match["month"]), int(match["day"]))
        except ValueError:
            return None
    return None


def _parse_day_range(text: str, reference_year: int, reference_month: int) -> Optional[DateSpan]:
    match = _DAY_RANGE_RE.match(text)
    if not match:
        return None
    days = [int(token) for token in re.findall(r"\d{1,2}", match["days"])]

    month_token = match["month"]
    if month_token.isdigit():
        month = int(month_token)
        if not 1 <= month <= 12:
            month = reference_month
    else:
        month = month_from_name(month_token) or reference_month

    year = _expand_year(match["year"]) if match["year"] else reference_year
    try:
        return DateSpan(start=date(year, month, min(days)), end=date(year, month, max(days)))
    except ValueError:
        return None


def parse_phrase(text: str, reference_year: int, reference_month: int) -> DateSpan:
    """Resolve a date phrase to a ``DateSpan``.

    ``reference_year`` and ``reference_month`` (1-based) fill in whatever the
    phrase leaves out. Unparseable phrases give ``UNRESOLVED``; they never raise.
    """
    text = (text or "").strip()

    if is_indeterminate(text):
        match = _MONTH_YEAR_PREFIX_RE.match(text)
        if match:
            span = _approximate(match["month"], match["year"])
            if span is not None:
                return span
        return UNRESOLVED

    absolute = _parse_absolute(text, reference_year)
    if absolute is not None:
        return DateSpan(start=absolute, end=absolute)

    span = _parse_day_range(text, reference_year, reference_month)
    if span is not None:
        return span

    match = _MONTH_YEAR_RE.match(text)
    if match:
        span = _approximate(match["month"], match["year"])
        if span is not None:
            return span

    logger.warning("date_phrase_unparseable", phrase=text)
    return UNRESOLVED

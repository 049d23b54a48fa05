"""Turn raw transcribed rows into canonical events."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import uuid4

import structlog
from dateutil.relativedelta import relativedelta

from .constants import ABSENT_IDENTIFIERS, DEFAULT_END_TIME, DEFAULT_EVENT_TYPE, DEFAULT_START_TIME, DEFAULTS
from .models import CanonicalEvent, DateStatus, RawEventRecord
from .parser import is_indeterminate, parse_phrase

logger = structlog.get_logger()

_SUBMISSION_FORMATS = ("%Y-%m-%d %H:%M:%S", "%d/%m/%Y")
_TYPE_KEYWORDS = (
    ("reunião", "REUNIÃO"),
    ("governo", "AÇÃO DE GOVERNO"),
)


def new_event_id() -> str:
    return str(uuid4())


def parse_submission_date(text: str) -> Optional[datetime]:
    text = (text or "").strip()
    if not text or text == "-":
        return None
    for fmt in _SUBMISSION_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    logger.warning("submission_date_unparseable", value=text)
    return None


def naive_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def submission_timestamp(value: Optional[date | datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return naive_local(value)
    return datetime.combine(value, datetime.min.time())


def event_times(
    start: Optional[date],
    end: Optional[date] = None,
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Combine calendar dates with the default business hours."""
    if start is None:
        return None, None
    if isinstance(start, datetime):
        start = naive_local(start).date()
    if isinstance(end, datetime):
        end = naive_local(end).date()
    return (
        datetime.combine(start, DEFAULT_START_TIME),
        datetime.combine(end or start, DEFAULT_END_TIME),
    )


def clean_identifier(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() in ABSENT_IDENTIFIERS:
        return None
    return value.replace("<br>", ", ").replace("\n", ", ")


def normalize_situation(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value.upper().replace("REALIZADA", "REALIZADO")


def infer_type(subject: str) -> Optional[str]:
    lowered = subject.lower()
    has_jps = "jps" in lowered
    has_jpe = "jpe" in lowered
    if has_jps and has_jpe:
        return "JPS E JPE"
    if has_jps:
        return "JPS"
    if has_jpe:
        return "JPE"
    for keyword, event_type in _TYPE_KEYWORDS:
        if keyword in lowered:
            return event_type
    return None


def _resolve_event_dates(
    raw: RawEventRecord,
    reference: date,
    today: date,
    policy: str,
    placeholder_months: int,
) -> tuple[Optional[date], Optional[date], DateStatus]:
    span = parse_phrase(raw.date_phrase, reference.year, reference.month)
    if span.resolved:
        return span.start, span.end, DateStatus.APPROXIMATE if span.approximate else DateStatus.RESOLVED
    if is_indeterminate(raw.date_phrase):
        return None, None, DateStatus.INDETERMINATE
    if policy == "unresolved":
        return None, None, DateStatus.UNPARSEABLE

    placeholder = today + relativedelta(months=placeholder_months)
    logger.warning(
        "event_date_placeholder",
        phrase=raw.date_phrase,
        subject=raw.subject,
        placeholder=placeholder.isoformat(),
    )
    return placeholder, placeholder, DateStatus.PLACEHOLDER


def normalize(
    raw: RawEventRecord,
    *,
    today: Optional[date] = None,
    policy: Optional[str] = None,
    placeholder_months: Optional[int] = None,
) -> CanonicalEvent:
    today = today or date.today()
    policy = policy or DEFAULTS["UNPARSEABLE_POLICY"]
    if placeholder_months is None:
        placeholder_months = DEFAULTS["PLACEHOLDER_MONTHS"]

    submission_date = parse_submission_date(raw.submitted)
    reference = submission_date.date() if submission_date else today
    start, end, status = _resolve_event_dates(raw, reference, today, policy, placeholder_months)
    start_time, end_time = event_times(start, end)

    return CanonicalEvent(
        id=new_event_id(),
        sei_number=clean_identifier(raw.sei),
        submission_date=submission_date,
        title=raw.subject,
        requester=raw.requester,
        location=raw.location.replace("<br>", "\n"),
        focal_point=raw.focal_point,
        start_time=start_time,
        end_time=end_time,
        situation=normalize_situation(raw.situation),
        daily_sei_number=clean_identifier(raw.daily_sei),
        type=raw.type or infer_type(raw.subject) or DEFAULT_EVENT_TYPE,
        date_status=status,
    )

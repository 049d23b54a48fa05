"""Domain types for agenda events."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional

from .constants import DEFAULT_EVENT_TYPE, INVALID_EVENT_TIME, INVALID_SUBMISSION_DATE
from .errors import AgendaValidationError


class DateStatus(str, Enum):
    """How an event's date was obtained."""

    RESOLVED = "resolved"
    APPROXIMATE = "approximate"
    INDETERMINATE = "indeterminate"
    PLACEHOLDER = "placeholder"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class RawEventRecord:
    """One transcribed row, exactly as it was typed."""

    sei: str = ""
    submitted: str = ""
    subject: str = ""
    requester: str = ""
    location: str = ""
    focal_point: str = ""
    date_phrase: str = ""
    situation: str = ""
    daily_sei: str = ""
    type: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawEventRecord":
        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        raw_type = data.get("type")
        return cls(
            sei=text("sei"),
            submitted=text("envio"),
            subject=text("assunto"),
            requester=text("solicitante"),
            location=text("local"),
            focal_point=text("pontoFocal"),
            date_phrase=text("data"),
            situation=text("situacao"),
            daily_sei=text("seiDiarias"),
            type=str(raw_type) if raw_type else None,
        )


def _iso_or(value: Optional[datetime], sentinel: str) -> str:
    return value.isoformat() if value is not None else sentinel


@dataclass(frozen=True)
class CanonicalEvent:
    id: str
    title: str
    requester: str
    location: str
    focal_point: str
    submission_date: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    sei_number: Optional[str] = None
    situation: Optional[str] = None
    daily_sei_number: Optional[str] = None
    description: Optional[str] = None
    participants: Optional[str] = None
    type: str = DEFAULT_EVENT_TYPE
    date_status: DateStatus = DateStatus.RESOLVED

    def __post_init__(self) -> None:
        if (self.start_time is None) != (self.end_time is None):
            raise AgendaValidationError(
                "Start and end time must both be set or both be unresolved",
                field="end_time",
                value=self.end_time,
            )

    @property
    def has_times(self) -> bool:
        return self.start_time is not None

    @property
    def effective_date(self) -> Optional[datetime]:
        return self.start_time or self.submission_date

    @property
    def submission_date_text(self) -> str:
        return _iso_or(self.submission_date, INVALID_SUBMISSION_DATE)

    @property
    def start_time_text(self) -> str:
        return _iso_or(self.start_time, INVALID_EVENT_TIME)

    @property
    def end_time_text(self) -> str:
        return _iso_or(self.end_time, INVALID_EVENT_TIME)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "submissionDate": self.submission_date_text,
            "title": self.title,
            "requester": self.requester,
            "location": self.location,
            "focalPoint": self.focal_point,
            "startTime": self.start_time_text,
            "endTime": self.end_time_text,
            "type": self.type,
            "dateStatus": self.date_status.value,
        }
        optional = {
            "seiNumber": self.sei_number,
            "situation": self.situation,
            "dailySeiNumber": self.daily_sei_number,
            "description": self.description,
            "participants": self.participants,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


EVENT_FIELDS = frozenset(f.name for f in fields(CanonicalEvent))


@dataclass(frozen=True)
class FilterCriteria:
    sei_number: Optional[str] = None
    action_type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    situation: Optional[str] = None
    focal_point: Optional[str] = None
    location: Optional[str] = None

"""Unit tests for domain types and error formatting."""

from __future__ import annotations

from datetime import datetime

import pytest

from agenda.events import (
    AgendaConfigError,
    AgendaDataError,
    AgendaError,
    AgendaValidationError,
    CanonicalEvent,
    DateStatus,
    RawEventRecord,
    format_error_for_user,
)


def test_raw_record_from_mapping(seed_rows) -> None:
    record = RawEventRecord.from_mapping(seed_rows[4])

    assert record.requester == "Prefeitura de Cedro"
    assert record.submitted == "2025-01-22 00:00:00"
    assert record.date_phrase == "19 a 22/02/2025"
    assert record.daily_sei.count("\n") == 1
    assert record.type == "JPS"


def test_raw_record_tolerates_missing_and_null_keys() -> None:
    record = RawEventRecord.from_mapping({"sei": None, "assunto": "Visita", "type": ""})

    assert record.sei == ""
    assert record.subject == "Visita"
    assert record.date_phrase == ""
    assert record.type is None


def test_event_requires_paired_times() -> None:
    with pytest.raises(AgendaValidationError) as excinfo:
        CanonicalEvent(
            id="1",
            title="Evento",
            requester="Solicitante",
            location="Recife",
            focal_point="Ponto Focal",
            start_time=datetime(2025, 1, 1, 8),
        )

    assert excinfo.value.field == "end_time"


def test_to_dict_omits_absent_optionals(make_event) -> None:
    event = make_event(start=datetime(2025, 2, 12, 8), situation="ATENDIDO", date_status=DateStatus.PLACEHOLDER)

    data = event.to_dict()

    assert data["startTime"] == "2025-02-12T08:00:00"
    assert data["endTime"] == "2025-02-12T17:00:00"
    assert data["situation"] == "ATENDIDO"
    assert data["dateStatus"] == "placeholder"
    assert "seiNumber" not in data
    assert "participants" not in data


def test_effective_date_prefers_start_time(make_event) -> None:
    submitted = datetime(2025, 1, 2)

    assert make_event(start=datetime(2025, 3, 1, 8), submitted=submitted).effective_date == datetime(2025, 3, 1, 8)
    assert make_event(submitted=submitted).effective_date == submitted
    assert make_event().effective_date is None


@pytest.mark.parametrize(
    "error, expected",
    [
        (AgendaValidationError("bad title", field="title"), "Validation Error: bad title"),
        (AgendaConfigError("bad level", variable="AGENDA_LOG_LEVEL"), "Configuration Error: bad level"),
        (AgendaDataError("no file", path="/tmp/x"), "Data Error: no file"),
        (AgendaError("generic"), "Error: generic"),
        (ValueError("boom"), "Error: boom"),
    ],
)
def test_format_error_for_user(error: Exception, expected: str) -> None:
    assert format_error_for_user(error) == expected


def test_errors_carry_code_and_details() -> None:
    validation = AgendaValidationError("bad title", field="title", value=3)
    config = AgendaConfigError("bad level", variable="AGENDA_LOG_LEVEL", value="LOUD")
    data = AgendaDataError("no file", path="/tmp/x")

    assert (validation.code, validation.details) == ("VALIDATION_ERROR", {"field": "title", "value": 3})
    assert (config.code, config.details) == ("CONFIG_ERROR", {"variable": "AGENDA_LOG_LEVEL", "value": "LOUD"})
    assert (data.code, data.details) == ("DATA_ERROR", {"path": "/tmp/x"})
    assert AgendaError("generic").code == "AGENDA_ERROR"
    assert str(validation) == "bad title"

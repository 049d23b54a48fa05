"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from datetime import date, datetime
from uuid import uuid4

import pytest
import structlog

from agenda.events import CanonicalEvent, EventStore, RawEventRecord, load_initial_data

TODAY = date(2025, 1, 31)

SEED_ROWS = [
    {
        "sei": "3900009117.003009/2024-13",
        "envio": "2024-12-10 00:00:00",
        "assunto": "Solicita JPS",
        "type": "JPS",
        "solicitante": "Bom Sucesso Futebol Clube",
        "local": "Rua Maragogi, 133 - Alto José do Pinho - Recife/PE",
        "pontoFocal": "Marcílio Batista",
        "data": "Janeiro/2025 A definir",
        "situacao": "SOLICITADO",
        "seiDiarias": "Não atendido",
    },
    {
        "sei": "1900000122.000030/2025-70",
        "envio": "2025-01-23 00:00:00",
        "assunto": "Solicita JPS",
        "type": "JPS",
        "solicitante": "Secretaria de Justiça",
        "local": "Auditório do 3° andar do Empresarial Palmira II",
        "pontoFocal": "Joana Figueirêdo",
        "data": "2025-01-29 00:00:00",
        "situacao": "ATENDIDO",
        "seiDiarias": "3900000034.000548/2025-19",
    },
    {
        "sei": "3900032430.000048/2025-09",
        "envio": "2025-02-03 00:00:00",
        "assunto": "Solicita JPS",
        "type": "JPS",
        "solicitante": "PMPE (20º BPM)",
        "local": "Sede do 20º BPM",
        "pontoFocal": "Major Ferraz",
        "data": "2025-02-12 00:00:00",
        "situacao": "ATENDIDO",
        "seiDiarias": "3900000034.000792/2025-81",
    },
    {
        "sei": "AÇÃO DE GOVERNO",
        "envio": "-",
        "assunto": "Solicita JPS",
        "type": "AÇÃO DE GOVERNO",
        "solicitante": "Secretaria de Justiça",
        "local": "Vicência (Vitimas das chuvas)",
        "pontoFocal": "Escola Municipal Luiz Maranhão",
        "data": "2025-02-14 00:00:00",
        "situacao": "ATENDIDO",
        "seiDiarias": "3900000034.000840/2025-31",
    },
    {
        "sei": "3900009117.000165/2025-03",
        "envio": "2025-01-22 00:00:00",
        "assunto": "Solicita JPS",
        "type": "JPS",
        "solicitante": "Prefeitura de Cedro",
        "local": "Secretaria de Assistência Social",
        "pontoFocal": "Mércia Bem Elias",
        "data": "19 a 22/02/2025",
        "situacao": "ARTICULADO",
        "seiDiarias": "3900000034.000928/2025-53\n3900000034.000950/2025-01",
    },
    {
        "sei": "3900009117.000163/2025-14",
        "envio": "2025-01-22 00:00:00",
        "assunto": "Solicita JPS",
        "type": "JPS",
        "solicitante": "Câmara Municipal de Tuparetama",
        "local": "Local a definir",
        "pontoFocal": "Vanda Lúcia Cavalcante Silvestre",
        "data": "A definir",
        "situacao": "SOLICITADO",
        "seiDiarias": "",
    },
    {
        "sei": "3900009117.000186/2025-11",
        "envio": "2025-01-27 00:00:00",
        "assunto": "Solicita JPE",
        "type": "JPE",
        "solicitante": "Prefeitura Tuparetama",
        "local": "TUPARETAMA",
        "pontoFocal": "A DEFINIR",
        "data": "A DEFINIR",
        "situacao": "SOLICITADO",
        "seiDiarias": "",
    },
    {
        "sei": "3900009117.000201/2025-40",
        "envio": "17/02/2025",
        "assunto": "Reunião com lideranças comunitárias",
        "solicitante": "Associação de Moradores",
        "local": "Centro Comunitário<br>Sala 2",
        "pontoFocal": "Paulo Henrique",
        "data": "17, 18 e 19/03/2025",
        "situacao": "Realizada",
        "seiDiarias": "-",
    },
    {
        "sei": "-",
        "envio": "-",
        "assunto": "Palestra sobre direitos",
        "solicitante": "Escola Estadual",
        "local": "Olinda",
        "pontoFocal": "Direção",
        "data": "Segundo semestre",
        "situacao": "SOLICITADO",
        "seiDiarias": "",
    },
]


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def seed_rows() -> list[dict]:
    return [dict(row) for row in SEED_ROWS]


@pytest.fixture
def raw_records(seed_rows) -> list[RawEventRecord]:
    return [RawEventRecord.from_mapping(row) for row in seed_rows]


@pytest.fixture
def loaded_store(raw_records) -> EventStore:
    store = EventStore()
    load_initial_data(store, raw_records, today=TODAY, policy="placeholder", placeholder_months=1)
    return store


@pytest.fixture
def seed_file(tmp_path, seed_rows):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(seed_rows, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def make_event():
    """Build canonical events directly, bypassing the normalizer."""

    def factory(
        start: datetime | None = None,
        end: datetime | None = None,
        submitted: datetime | None = None,
        **fields,
    ) -> CanonicalEvent:
        values = {
            "id": str(uuid4()),
            "title": "Evento",
            "requester": "Solicitante",
            "location": "Recife",
            "focal_point": "Ponto Focal",
        }
        values.update(fields)
        if start is not None and end is None:
            end = start.replace(hour=17)
        return CanonicalEvent(submission_date=submitted, start_time=start, end_time=end, **values)

    return factory

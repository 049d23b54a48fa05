"""Constants for the agenda event engine."""

from __future__ import annotations

from datetime import time

INVALID_SUBMISSION_DATE = "Data Inválida"
INVALID_EVENT_TIME = "Hora Inválida"

DEFAULT_START_TIME = time(8, 0)
DEFAULT_END_TIME = time(17, 0)

DEFAULT_EVENT_TYPE = "OUTRO"
APPROXIMATE_DAY = 15
DEFAULT_DATA_FILENAME = "events.json"
DEFAULT_CALENDAR_NAME = "Agenda"
PROD_ID = "-//agenda//events//PT"

MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

MONTH_ABBREVIATIONS = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")

SITUATIONS = (
    "ARTICULADO",
    "SOLICITADO",
    "REALIZADO",
    "CANCELADO PELO SOLICITANTE",
    "ATENDIDO",
)

ACTION_TYPES = (
    "JPS",
    "JPE",
    "REUNIÃO",
    "EVENTO EXTERNO",
    "EVENTO INTERNO",
    "CAPACITAÇÃO",
    "FISCALIZAÇÃO",
    "ATENDIMENTO JURÍDICO",
    "PALESTRA",
    "AÇÃO DE GOVERNO",
    DEFAULT_EVENT_TYPE,
)

ALL_ACTION_TYPES = {"todos", "all"}
ALL_SITUATIONS = {"todas", "all"}

ABSENT_IDENTIFIERS = {"", "-", "Não atendido"}

UNPARSEABLE_POLICIES = {"placeholder", "unresolved"}

DEFAULTS = {
    "LOG_LEVEL": "WARNING",
    "UNPARSEABLE_POLICY": "placeholder",
    "PLACEHOLDER_MONTHS": 1,
}

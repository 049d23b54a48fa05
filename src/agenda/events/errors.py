"""Exceptions raised by agenda operations.

Bad data in transcribed records is never an error; these cover caller
mistakes, bad configuration and unreadable seed files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


@dataclass
class AgendaError(Exception):
    message: str
    code: str = "AGENDA_ERROR"
    details: Optional[dict[str, Any]] = None

    label: ClassVar[str] = "Error"

    def __str__(self) -> str:
        return self.message


@dataclass
class AgendaValidationError(AgendaError):
    field: Optional[str] = None
    value: Any = None
    code: str = "VALIDATION_ERROR"

    label: ClassVar[str] = "Validation Error"

    def __post_init__(self) -> None:
        self.details = {"field": self.field, "value": self.value}


@dataclass
class AgendaConfigError(AgendaError):
    variable: Optional[str] = None
    value: Any = None
    code: str = "CONFIG_ERROR"

    label: ClassVar[str] = "Configuration Error"

    def __post_init__(self) -> None:
        self.details = {"variable": self.variable, "value": self.value}


@dataclass
class AgendaDataError(AgendaError):
    path: Optional[str] = None
    code: str = "DATA_ERROR"

    label: ClassVar[str] = "Data Error"

    def __post_init__(self) -> None:
        self.details = {"path": self.path}


def format_error_for_user(error: Exception) -> str:
    label = error.label if isinstance(error, AgendaError) else AgendaError.label
    return f"{label}: {error}"

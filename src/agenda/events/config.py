"""Configuration loader for the agenda event engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_DATA_FILENAME, DEFAULTS, UNPARSEABLE_POLICIES
from .errors import AgendaConfigError


@dataclass(frozen=True)
class AgendaConfig:
    data_file: Path
    log_level: str
    unparseable_policy: str
    placeholder_months: int


def default_data_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base_dir = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base_dir / "agenda" / DEFAULT_DATA_FILENAME


def resolve_data_path(path: Optional[Path]) -> Path:
    resolved = (path or load_config().data_file).expanduser()
    return resolved.resolve()


def _log_level() -> str:
    level = os.getenv("AGENDA_LOG_LEVEL", DEFAULTS["LOG_LEVEL"]).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise AgendaConfigError(f"Unknown log level '{level}'", variable="AGENDA_LOG_LEVEL", value=level)
    return level


def _unparseable_policy() -> str:
    policy = os.getenv("AGENDA_UNPARSEABLE_POLICY", DEFAULTS["UNPARSEABLE_POLICY"]).strip().lower()
    if policy not in UNPARSEABLE_POLICIES:
        raise AgendaConfigError(
            f"Unparseable policy must be one of: {', '.join(sorted(UNPARSEABLE_POLICIES))}",
            variable="AGENDA_UNPARSEABLE_POLICY",
            value=policy,
        )
    return policy


def _placeholder_months() -> int:
    raw = os.getenv("AGENDA_PLACEHOLDER_MONTHS", str(DEFAULTS["PLACEHOLDER_MONTHS"]))
    try:
        months = int(raw)
    except ValueError as exc:
        raise AgendaConfigError(
            "Placeholder months must be an integer",
            variable="AGENDA_PLACEHOLDER_MONTHS",
            value=raw,
        ) from exc
    if months < 0:
        raise AgendaConfigError(
            "Placeholder months must not be negative",
            variable="AGENDA_PLACEHOLDER_MONTHS",
            value=raw,
        )
    return months


def load_config() -> AgendaConfig:
    data_file = os.getenv("AGENDA_DATA_FILE")
    return AgendaConfig(
        data_file=Path(data_file) if data_file else default_data_path(),
        log_level=_log_level(),
        unparseable_policy=_unparseable_policy(),
        placeholder_months=_placeholder_months(),
    )

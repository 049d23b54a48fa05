"""CLI entry point for agenda."""

from __future__ import annotations

import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import structlog
import typer

from agenda import __version__
from agenda.events import (
    CanonicalEvent,
    EventStore,
    filter_events,
    format_error_for_user,
    get_events_for_day,
    get_events_for_month,
    get_events_for_week,
    load_config,
    load_initial_data,
    parse_date_value,
    read_raw_records,
    resolve_data_path,
    to_icalendar,
    to_storage_rows,
    validate_filter_criteria,
)
from agenda.events.constants import ACTION_TYPES, SITUATIONS

app = typer.Typer(help="Query hand-transcribed agenda events.")

EXPORT_FORMATS = {"json", "ics"}

FILE_OPTION_HELP = "Event data file (JSON list of raw records; defaults to AGENDA_DATA_FILE)."
TYPE_OPTION_HELP = f"Action type ({', '.join(ACTION_TYPES)}; TODOS for any)."
SITUATION_OPTION_HELP = f"Situation ({', '.join(SITUATIONS)}; TODAS for any)."


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"agenda version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    )
):
    """Normalize and query agenda events."""
    try:
        configure_logging(load_config().log_level)
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load_store(file: Optional[str]) -> EventStore:
    path = resolve_data_path(Path(file) if file else None)
    store = EventStore()
    load_initial_data(store, read_raw_records(path))
    return store


def _reference_date(value: Optional[str]) -> date:
    return parse_date_value(value, field="date") if value else date.today()


def _format_event_compact(event: CanonicalEvent) -> str:
    return f"{event.start_time_text} -> {event.end_time_text} | {event.type} | {event.title} | {event.requester}"


def _format_event_detail(event: CanonicalEvent) -> str:
    lines = [
        f"ID: {event.id}",
        f"Title: {event.title}",
        f"Type: {event.type}",
        f"Requester: {event.requester}",
        f"Focal point: {event.focal_point}",
        f"Location: {event.location}",
        f"Submitted: {event.submission_date_text}",
        f"Start: {event.start_time_text}",
        f"End: {event.end_time_text}",
        f"Date status: {event.date_status.value}",
    ]
    if event.sei_number is not None:
        lines.append(f"SEI: {event.sei_number}")
    if event.situation is not None:
        lines.append(f"Situation: {event.situation}")
    if event.daily_sei_number is not None:
        lines.append(f"Daily SEI: {event.daily_sei_number}")
    if event.description is not None:
        lines.append(f"Description: {event.description}")
    if event.participants is not None:
        lines.append(f"Participants: {event.participants}")
    return "\n".join(lines)


def _echo_events(events: list[CanonicalEvent]) -> None:
    if not events:
        typer.echo("No events found.")
        return
    for event in events:
        typer.echo(_format_event_compact(event))
    typer.echo(f"Total: {len(events)} event(s)")


@app.command("day")
def agenda_day(
    day: Optional[str] = typer.Option(None, "--date", "-d", help="Day to show (YYYY-MM-DD, defaults to today)."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """List events happening on a day."""
    try:
        store = _load_store(file)
        events = get_events_for_day(store, _reference_date(day))
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_events(events)


@app.command("week")
def agenda_week(
    day: Optional[str] = typer.Option(None, "--date", "-d", help="Any day in the week (YYYY-MM-DD, defaults to today)."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """List events in the Monday-to-Sunday week containing a day."""
    try:
        store = _load_store(file)
        events = get_events_for_week(store, _reference_date(day))
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_events(events)


@app.command("month")
def agenda_month(
    day: Optional[str] = typer.Option(None, "--date", "-d", help="Any day in the month (YYYY-MM-DD, defaults to today)."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """List events in the calendar month containing a day."""
    try:
        store = _load_store(file)
        events = get_events_for_month(store, _reference_date(day))
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_events(events)


@app.command("filter")
def agenda_filter(
    sei: Optional[str] = typer.Option(None, "--sei", help="SEI number (digits are matched as a substring)."),
    action_type: Optional[str] = typer.Option(None, "--type", "-t", help=TYPE_OPTION_HELP),
    range_from: Optional[str] = typer.Option(None, "--from", help="Earliest event day (YYYY-MM-DD)."),
    range_to: Optional[str] = typer.Option(None, "--to", help="Latest event day (YYYY-MM-DD)."),
    situation: Optional[str] = typer.Option(None, "--situation", help=SITUATION_OPTION_HELP),
    focal_point: Optional[str] = typer.Option(None, "--focal-point", help="Focal point substring."),
    location: Optional[str] = typer.Option(None, "--location", help="Location substring."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """Search events by criteria, newest first."""
    try:
        criteria = validate_filter_criteria(
            sei_number=sei,
            action_type=action_type,
            start_date=parse_date_value(range_from, field="from") if range_from else None,
            end_date=parse_date_value(range_to, field="to") if range_to else None,
            situation=situation,
            focal_point=focal_point,
            location=location,
        )
        store = _load_store(file)
        events = filter_events(store, criteria)
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_events(events)


@app.command("show")
def agenda_show(
    index: int = typer.Option(..., "--index", "-i", help="Position in the loaded list (1 = first record)."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """Show every field of one event."""
    try:
        events = _load_store(file).snapshot()
        if not 1 <= index <= len(events):
            raise typer.BadParameter(f"Index must be between 1 and {len(events)}")
        event = events[index - 1]
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(_format_event_detail(event))


@app.command("export")
def agenda_export(
    export_format: str = typer.Option("json", "--format", help=f"Output format ({', '.join(sorted(EXPORT_FORMATS))})."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file (defaults to stdout)."),
    name: Optional[str] = typer.Option(None, "--name", help="Calendar display name (ics only)."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
):
    """Export normalized events as storage rows (json) or an iCalendar file (ics)."""
    try:
        if export_format not in EXPORT_FORMATS:
            raise typer.BadParameter(f"Format must be one of: {', '.join(sorted(EXPORT_FORMATS))}")
        events = _load_store(file).snapshot()
        if export_format == "ics":
            calendar = to_icalendar(events, name=name)
            written = len(calendar.walk("VEVENT"))
            content = calendar.to_ical().decode("utf-8")
        else:
            rows = to_storage_rows(events)
            written = len(rows)
            content = json.dumps(rows, ensure_ascii=False, indent=2)
        if output:
            Path(output).expanduser().write_text(content, encoding="utf-8")
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output:
        typer.echo(f"✅ Exported {written} event(s) to {output}")
    else:
        typer.echo(content)


def cli():
    """Entry point for the CLI."""
    app()

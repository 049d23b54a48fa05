"""Unit tests for day, week and month views."""

from __future__ import annotations

from datetime import date, datetime, time

from agenda.events import get_events_for_day, get_events_for_month, get_events_for_week
from agenda.events.queries import day_bounds, month_bounds, query_interval, week_bounds


def _requesters(events) -> list[str]:
    return [event.requester for event in events]


def test_day_bounds() -> None:
    assert day_bounds(date(2025, 2, 20)) == (datetime(2025, 2, 20), datetime.combine(date(2025, 2, 20), time.max))


def test_week_bounds_start_on_monday() -> None:
    start, end = week_bounds(date(2025, 2, 12))

    assert start == datetime(2025, 2, 10)
    assert end == datetime.combine(date(2025, 2, 16), time.max)
    assert week_bounds(date(2025, 2, 16))[0] == datetime(2025, 2, 10)
    assert week_bounds(date(2025, 2, 17))[0] == datetime(2025, 2, 17)


def test_month_bounds() -> None:
    start, end = month_bounds(datetime(2024, 2, 10, 15, 30))

    assert start == datetime(2024, 2, 1)
    assert end == datetime.combine(date(2024, 2, 29), time.max)


def test_day_query_matches_inside_multi_day_span(loaded_store) -> None:
    events = get_events_for_day(loaded_store, date(2025, 2, 20))

    assert _requesters(events) == ["Prefeitura de Cedro"]


def test_day_query_uses_submission_date_when_time_is_unresolved(loaded_store) -> None:
    events = get_events_for_day(loaded_store, date(2025, 1, 22))

    assert _requesters(events) == ["Câmara Municipal de Tuparetama"]


def test_week_query_sorted_ascending(loaded_store) -> None:
    events = get_events_for_week(loaded_store, date(2025, 2, 12))

    assert _requesters(events) == ["PMPE (20º BPM)", "Secretaria de Justiça"]


def test_month_query_sorts_unresolved_last_in_store_order(loaded_store) -> None:
    events = get_events_for_month(loaded_store, date(2025, 1, 5))

    assert _requesters(events) == [
        "Bom Sucesso Futebol Clube",
        "Secretaria de Justiça",
        "Câmara Municipal de Tuparetama",
        "Prefeitura Tuparetama",
    ]
    assert [event.start_time is None for event in events] == [False, False, True, True]


def test_month_query_includes_placeholder_dates(loaded_store) -> None:
    events = get_events_for_month(loaded_store, date(2025, 2, 1))

    assert _requesters(events) == [
        "PMPE (20º BPM)",
        "Secretaria de Justiça",
        "Prefeitura de Cedro",
        "Escola Estadual",
    ]


def test_event_spanning_month_boundary_matches_both_months(make_event) -> None:
    event = make_event(start=datetime(2025, 2, 27, 8), end=datetime(2025, 3, 2, 17))

    assert query_interval([event], *month_bounds(date(2025, 2, 1))) == [event]
    assert query_interval([event], *month_bounds(date(2025, 3, 1))) == [event]
    assert query_interval([event], *month_bounds(date(2025, 4, 1))) == []


def test_multi_day_event_matches_first_and_last_day(make_event) -> None:
    event = make_event(start=datetime(2025, 3, 3, 8), end=datetime(2025, 3, 5, 17))

    assert query_interval([event], *day_bounds(date(2025, 3, 2))) == []
    assert query_interval([event], *day_bounds(date(2025, 3, 3))) == [event]
    assert query_interval([event], *day_bounds(date(2025, 3, 5))) == [event]
    assert query_interval([event], *day_bounds(date(2025, 3, 6))) == []


def test_fully_unresolved_event_never_matches(make_event) -> None:
    event = make_event()

    assert query_interval([event], datetime.min, datetime.max) == []


def test_sort_ties_keep_store_order(make_event) -> None:
    same_start = datetime(2025, 5, 5, 8)
    first = make_event(start=same_start, title="a")
    second = make_event(start=same_start, title="b")
    earlier = make_event(start=datetime(2025, 5, 4, 8), title="c")
    pending = make_event(submitted=datetime(2025, 5, 5), title="d")

    events = query_interval([pending, first, second, earlier], *day_bounds(date(2025, 5, 4)))
    assert [event.title for event in events] == ["c"]

    events = query_interval([pending, first, second, earlier], *month_bounds(date(2025, 5, 5)))
    assert [event.title for event in events] == ["c", "a", "b", "d"]

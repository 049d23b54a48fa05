"""In-memory event collection."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Iterator, Mapping, Optional

import structlog

from .errors import AgendaValidationError
from .models import EVENT_FIELDS, CanonicalEvent

logger = structlog.get_logger()


class EventStore:
    """Ordered collection of canonical events, newest first.

    The store is the only owner of the list. Events are frozen, so callers can
    hold on to what they read without affecting stored state.
    """

    def __init__(self, events: Optional[Iterable[CanonicalEvent]] = None) -> None:
        self._events: list[CanonicalEvent] = list(events or [])

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[CanonicalEvent]:
        return iter(self.snapshot())

    def __contains__(self, event_id: object) -> bool:
        return self._index_of(event_id) is not None

    def snapshot(self) -> list[CanonicalEvent]:
        return list(self._events)

    def load(self, events: Iterable[CanonicalEvent]) -> None:
        self._events = list(events)
        logger.info("event_store_loaded", count=len(self._events))

    def insert(self, event: CanonicalEvent) -> CanonicalEvent:
        self._events.insert(0, event)
        logger.debug("event_inserted", event_id=event.id)
        return event

    def find_by_id(self, event_id: str) -> Optional[CanonicalEvent]:
        index = self._index_of(event_id)
        return self._events[index] if index is not None else None

    def update_by_id(self, event_id: str, changes: Mapping[str, Any]) -> Optional[CanonicalEvent]:
        unknown = set(changes) - EVENT_FIELDS
        if unknown:
            raise AgendaValidationError(
                f"Unknown event field(s): {', '.join(sorted(unknown))}",
                field="changes",
                value=sorted(unknown),
            )
        if "id" in changes and changes["id"] != event_id:
            raise AgendaValidationError("Event id cannot be changed", field="id", value=changes["id"])

        index = self._index_of(event_id)
        if index is None:
            return None
        if not changes:
            return self._events[index]
        updated = replace(self._events[index], **changes)
        self._events[index] = updated
        logger.debug("event_updated", event_id=event_id, fields=sorted(changes))
        return updated

    def delete_by_id(self, event_id: str) -> bool:
        index = self._index_of(event_id)
        if index is None:
            return False
        del self._events[index]
        logger.debug("event_deleted", event_id=event_id)
        return True

    def _index_of(self, event_id: object) -> Optional[int]:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

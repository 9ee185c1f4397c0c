# warehouse-fulfillment/fulfillment/events.py
"""Event log: collects simulation output and presents it in time order."""

from __future__ import annotations

import logging
from typing import Iterator, List

from .models import Event, EventKind

logger = logging.getLogger(__name__)


class EventLog:
    """Append-only list of events in the order they were recorded."""

    def __init__(self) -> None:
        self._events: List[Event] = []

    def record(self, time: str, kind: EventKind, payload: str) -> Event:
        event = Event(time=time, kind=kind, payload=payload)
        self._events.append(event)
        logger.debug(f"Recorded {event}")
        return event

    def sorted_events(self) -> List[Event]:
        """
        Events sorted by HHMM time.

        The sort is stable, so events sharing a timestamp keep their
        recording order.
        """
        return sorted(self._events, key=lambda e: e.time)

    def format_lines(self) -> List[str]:
        """Output lines in chronological order."""
        return [str(e) for e in self.sorted_events()]

    def by_kind(self, kind: EventKind) -> List[Event]:
        return [e for e in self._events if e.kind == kind]

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

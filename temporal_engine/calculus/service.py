"""
Event calculus for legal narrative reasoning.

Answers "does fluent F hold at time T?" by replaying a chronological event
log against initiate/terminate rules keyed by event id.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime

from temporal_engine.calculus.schemas import Fluent, LegalEvent

logger = logging.getLogger(__name__)


class EventCalculus:
    """Fluent truth maintenance over a chronological event log.

    The event list is kept sorted by timestamp. Sorting is stable, so events
    sharing a timestamp replay in insertion order.
    """

    def __init__(self) -> None:
        self._initially: set[Fluent] = set()
        self._events: list[LegalEvent] = []
        self._initiates: dict[str, set[Fluent]] = defaultdict(set)
        self._terminates: dict[str, set[Fluent]] = defaultdict(set)

    # =========================================================================
    # Setup
    # =========================================================================

    def set_initially_true(self, fluent: Fluent) -> None:
        """Mark a fluent as holding before any event."""
        self._initially.add(fluent)

    def initially_true(self, fluent: Fluent) -> bool:
        return fluent in self._initially

    def add_event(self, event: LegalEvent) -> None:
        """Append an event and restore chronological order."""
        self._events.append(event)
        self._events.sort(key=lambda e: e.timestamp)
        logger.debug("Added event %s (%s) at %s", event.id, event.label, event.timestamp)

    def add_initiates(self, event_id: str, fluent: Fluent) -> None:
        """Declare that the event makes the fluent true."""
        self._initiates[event_id].add(fluent)

    def add_terminates(self, event_id: str, fluent: Fluent) -> None:
        """Declare that the event makes the fluent false."""
        self._terminates[event_id].add(fluent)

    # =========================================================================
    # Queries
    # =========================================================================

    def holds_at(self, fluent: Fluent, time: datetime) -> bool:
        """Check whether a fluent holds at a given instant.

        Events at exactly ``time`` take effect. When one event both initiates
        and terminates the fluent, termination wins.

        Args:
            fluent: The proposition to evaluate
            time: Instant to evaluate at

        Returns:
            True if the fluent holds at ``time``
        """
        holds = fluent in self._initially

        for event in self._events:
            if event.timestamp > time:
                break
            if fluent in self._initiates.get(event.id, ()):
                holds = True
            if fluent in self._terminates.get(event.id, ()):
                holds = False

        return holds

    @property
    def events(self) -> list[LegalEvent]:
        """The event log in chronological order."""
        return list(self._events)

    def events_in_interval(self, start: datetime, end: datetime) -> list[LegalEvent]:
        """Events with ``start <= timestamp <= end``."""
        return [e for e in self._events if start <= e.timestamp <= end]

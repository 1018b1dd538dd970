"""
Version timelines for multi-statute histories.

Tracks which version of each subject is in force over which dates, and finds
the gaps and overlaps in those histories.
"""

from __future__ import annotations

import logging
from datetime import date

from temporal_engine.core.ontology import TimeInterval, predecessor, successor
from temporal_engine.timeline.schemas import TimelineEntry

logger = logging.getLogger(__name__)


class Timeline:
    """Ordered collection of timeline entries.

    Entries are kept sorted by ``(subject_id, interval.start)``; entries that
    tie on that key keep their insertion order.
    """

    def __init__(self, entries: list[TimelineEntry] | None = None) -> None:
        self._entries: list[TimelineEntry] = []
        for entry in entries or []:
            self.add_entry(entry)

    def __len__(self) -> int:
        return len(self._entries)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_entry(self, entry: TimelineEntry) -> None:
        """Insert an entry and restore sort order."""
        self._entries.append(entry)
        self._entries.sort(key=lambda e: (e.subject_id, e.interval.start))
        logger.debug("Added %s v%d %s", entry.subject_id, entry.version, entry.interval)

    def merge(self, other: Timeline) -> None:
        """Fold another timeline's entries into this one.

        Duplicates are kept.
        """
        for entry in other.entries:
            self.add_entry(entry)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def entries(self) -> list[TimelineEntry]:
        return list(self._entries)

    def entries_for_subject(self, subject_id: str) -> list[TimelineEntry]:
        return [e for e in self._entries if e.subject_id == subject_id]

    def active_version_at(self, subject_id: str, on: date) -> TimelineEntry | None:
        """Get the highest-versioned entry in force on a date.

        If several containing entries share the highest version, the first in
        timeline order is returned.

        Args:
            subject_id: The subject identifier
            on: Date to check

        Returns:
            TimelineEntry if one contains the date, None otherwise
        """
        candidates = [
            e for e in self.entries_for_subject(subject_id) if e.interval.contains_date(on)
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda e: e.version)

    def detect_gaps(self, subject_id: str) -> list[TimeInterval]:
        """Find uncovered stretches between consecutive entries of a subject.

        Consecutive means adjacent in start-date order; an entry that
        ends later than its successor does not mask a gap further on.
        """
        entries = self.entries_for_subject(subject_id)

        gaps = []
        for current, following in zip(entries, entries[1:]):
            if current.interval.end < following.interval.start:
                gap = TimeInterval.try_new(
                    successor(current.interval.end),
                    predecessor(following.interval.start),
                )
                if gap is not None:
                    gaps.append(gap)

        return gaps

    def detect_overlaps(self, subject_id: str) -> list[tuple[TimeInterval, int, int]]:
        """Find every pair of entries whose intervals share at least one day.

        Returns:
            List of (overlap interval, first version, second version) tuples
        """
        entries = self.entries_for_subject(subject_id)

        overlaps = []
        for i, first in enumerate(entries):
            for second in entries[i + 1:]:
                overlap = first.interval.intersection(second.interval)
                if overlap is not None:
                    overlaps.append((overlap, first.version, second.version))

        return overlaps

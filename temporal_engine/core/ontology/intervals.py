"""Closed date intervals and Allen's interval algebra.

The thirteen Allen relations are mutually exclusive and jointly exhaustive:
any ordered pair of intervals stands in exactly one of them.
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Allen Relations
# =============================================================================


class AllenRelation(str, Enum):
    """Relation of one interval to another."""

    BEFORE = "before"
    MEETS = "meets"
    OVERLAPS = "overlaps"
    FINISHED_BY = "finished-by"
    CONTAINS = "contains"
    STARTS = "starts"
    EQUAL = "equals"
    STARTED_BY = "started-by"
    DURING = "during"
    FINISHES = "finishes"
    OVERLAPPED_BY = "overlapped-by"
    MET_BY = "met-by"
    AFTER = "after"

    @property
    def inverse(self) -> AllenRelation:
        """The converse relation (B relative to A when A relative to B is self)."""
        return _INVERSES[self]


_INVERSES: dict[AllenRelation, AllenRelation] = {
    AllenRelation.BEFORE: AllenRelation.AFTER,
    AllenRelation.AFTER: AllenRelation.BEFORE,
    AllenRelation.MEETS: AllenRelation.MET_BY,
    AllenRelation.MET_BY: AllenRelation.MEETS,
    AllenRelation.OVERLAPS: AllenRelation.OVERLAPPED_BY,
    AllenRelation.OVERLAPPED_BY: AllenRelation.OVERLAPS,
    AllenRelation.STARTS: AllenRelation.STARTED_BY,
    AllenRelation.STARTED_BY: AllenRelation.STARTS,
    AllenRelation.FINISHES: AllenRelation.FINISHED_BY,
    AllenRelation.FINISHED_BY: AllenRelation.FINISHES,
    AllenRelation.CONTAINS: AllenRelation.DURING,
    AllenRelation.DURING: AllenRelation.CONTAINS,
    AllenRelation.EQUAL: AllenRelation.EQUAL,
}


# =============================================================================
# Day Arithmetic
# =============================================================================


def successor(value: date) -> date:
    """The next calendar day; ``date.max`` has no successor and is returned as-is."""
    try:
        return value + timedelta(days=1)
    except OverflowError:
        return value


def predecessor(value: date) -> date:
    """The previous calendar day; ``date.min`` has no predecessor and is returned as-is."""
    try:
        return value - timedelta(days=1)
    except OverflowError:
        return value


# =============================================================================
# Time Interval
# =============================================================================


class TimeInterval(BaseModel):
    """A closed interval of calendar dates, both ends inclusive.

    Constructing with ``start > end`` raises ``pydantic.ValidationError``.
    Use :meth:`try_new` when the bounds have not been validated yet.
    """

    model_config = ConfigDict(frozen=True)

    start: date = Field(..., description="First day of the interval")
    end: date = Field(..., description="Last day of the interval")

    @model_validator(mode="after")
    def check_order(self) -> TimeInterval:
        if self.start > self.end:
            raise ValueError(
                f"Start date must be before or equal to end date ({self.start} > {self.end})"
            )
        return self

    @classmethod
    def try_new(cls, start: date, end: date) -> TimeInterval | None:
        """Build an interval, or return None if ``start > end``."""
        if start <= end:
            return cls(start=start, end=end)
        return None

    def duration_days(self) -> int:
        """Number of days between start and end (0 for a single-day interval)."""
        return (self.end - self.start).days

    def contains_date(self, value: date) -> bool:
        """Check whether a date falls inside the interval."""
        return self.start <= value <= self.end

    def relate(self, other: TimeInterval) -> AllenRelation:
        """Classify this interval against another.

        The checks run in a fixed order; degenerate single-day intervals can
        satisfy more than one textbook definition and are resolved by the
        first branch that matches.
        """
        if self.end < other.start:
            return AllenRelation.BEFORE
        elif self.end == other.start:
            return AllenRelation.MEETS
        elif self.start < other.start and other.start < self.end < other.end:
            return AllenRelation.OVERLAPS
        elif self.start > other.start and self.end == other.end:
            return AllenRelation.FINISHES
        elif self.start < other.start and self.end > other.end:
            return AllenRelation.CONTAINS
        elif self.start == other.start and self.end < other.end:
            return AllenRelation.STARTS
        elif self.start == other.start and self.end == other.end:
            return AllenRelation.EQUAL
        elif self.start == other.start and self.end > other.end:
            return AllenRelation.STARTED_BY
        elif self.start > other.start and self.end < other.end:
            return AllenRelation.DURING
        elif self.start < other.start and self.end == other.end:
            return AllenRelation.FINISHED_BY
        elif other.start < self.start < other.end and self.end > other.end:
            return AllenRelation.OVERLAPPED_BY
        elif self.start == other.end:
            return AllenRelation.MET_BY
        return AllenRelation.AFTER

    def intersection(self, other: TimeInterval) -> TimeInterval | None:
        """The common sub-interval, or None if the intervals share no day."""
        return TimeInterval.try_new(max(self.start, other.start), min(self.end, other.end))

    def union(self, other: TimeInterval) -> TimeInterval | None:
        """The spanning interval, or None if the intervals are disjoint and not touching."""
        if self.relate(other) in (AllenRelation.BEFORE, AllenRelation.AFTER):
            return None
        return TimeInterval(start=min(self.start, other.start), end=max(self.end, other.end))

    def __str__(self) -> str:
        return f"[{self.start} to {self.end}]"

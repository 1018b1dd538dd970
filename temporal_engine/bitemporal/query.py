"""Composable bitemporal query builder."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from temporal_engine.bitemporal.schemas import BitemporalRecord
from temporal_engine.bitemporal.service import BitemporalDatabase


class TemporalQuery(BaseModel):
    """Immutable filter over a BitemporalDatabase.

    Each builder method returns a new query. Filters left unset match every
    record; set filters are combined with AND.

    Example:
        TemporalQuery().valid_on(date(2025, 6, 1)).current_only().execute(db)
    """

    model_config = ConfigDict(frozen=True)

    valid_date: date | None = None
    transaction_instant: datetime | None = None
    only_current: bool = False
    subject: str | None = None

    def valid_on(self, on: date) -> TemporalQuery:
        """Keep records whose valid-time window contains ``on``."""
        return self.model_copy(update={"valid_date": on})

    def transaction_at(self, instant: datetime) -> TemporalQuery:
        """Keep records the system believed at ``instant``."""
        return self.model_copy(update={"transaction_instant": instant})

    def current_only(self, current: bool = True) -> TemporalQuery:
        return self.model_copy(update={"only_current": current})

    def subject_id(self, subject_id: str) -> TemporalQuery:
        return self.model_copy(update={"subject": subject_id})

    def execute(self, db: BitemporalDatabase) -> list[BitemporalRecord]:
        """Scan the database and return matching records in insertion order."""
        results = db.records

        if self.valid_date is not None:
            results = [r for r in results if r.time.is_currently_valid(self.valid_date)]

        if self.transaction_instant is not None:
            instant = self.transaction_instant
            results = [
                r
                for r in results
                if r.time.transaction_time <= instant
                and (r.time.transaction_to is None or r.time.transaction_to > instant)
            ]

        if self.only_current:
            results = [r for r in results if r.time.is_current()]

        if self.subject is not None:
            results = [r for r in results if r.subject_id == self.subject]

        return results

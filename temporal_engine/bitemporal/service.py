"""
Append-only bitemporal record store.

Records are never deleted or edited. A correction inserts a new record and
closes the transaction window of the one it replaces.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from temporal_engine.bitemporal.schemas import BitemporalRecord

logger = logging.getLogger(__name__)


class BitemporalDatabase:
    """In-memory bitemporal store with as-of and current queries."""

    def __init__(self) -> None:
        self._records: list[BitemporalRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    @property
    def records(self) -> list[BitemporalRecord]:
        """All records in insertion order."""
        return list(self._records)

    # =========================================================================
    # Writes
    # =========================================================================

    def insert(self, record: BitemporalRecord) -> None:
        """Append a record."""
        self._records.append(record)
        logger.debug(
            "Inserted %s v%d recorded at %s",
            record.subject_id,
            record.version,
            record.time.transaction_time,
        )

    def supersede(self, record: BitemporalRecord, transaction_to: datetime) -> BitemporalRecord:
        """Close the transaction window of a stored, current record.

        The stored value is swapped for its superseded copy in place of the
        original, so insertion order is unchanged.

        Args:
            record: A record previously inserted into this database
            transaction_to: When the system stopped believing the record

        Returns:
            The superseded copy now held by the database

        Raises:
            ValueError: If the record is not stored or is already superseded
        """
        try:
            index = self._records.index(record)
        except ValueError:
            raise ValueError(
                f"Record {record.subject_id} v{record.version} is not stored in this database"
            ) from None

        if not self._records[index].is_current():
            raise ValueError(
                f"Record {record.subject_id} v{record.version} is already superseded"
            )

        superseded = self._records[index].supersede(transaction_to)
        self._records[index] = superseded
        logger.debug(
            "Superseded %s v%d at %s", record.subject_id, record.version, transaction_to
        )
        return superseded

    def correct(self, record: BitemporalRecord, replacement: BitemporalRecord) -> BitemporalRecord:
        """Replace a record with a correction recorded at the replacement's transaction time.

        Returns:
            The superseded copy of ``record``
        """
        superseded = self.supersede(record, replacement.time.transaction_time)
        self.insert(replacement)
        return superseded

    # =========================================================================
    # Queries
    # =========================================================================

    def query_as_of(self, valid_time: date, transaction_time: datetime) -> list[BitemporalRecord]:
        """What the system believed at ``transaction_time`` about ``valid_time``."""
        return [
            r
            for r in self._records
            if r.time.is_currently_valid(valid_time)
            and r.time.transaction_time <= transaction_time
            and (r.time.transaction_to is None or r.time.transaction_to > transaction_time)
        ]

    def query_current(self, valid_time: date) -> list[BitemporalRecord]:
        """Current records valid on ``valid_time``."""
        return [
            r
            for r in self._records
            if r.time.is_currently_valid(valid_time) and r.time.is_current()
        ]

    def history(self, subject_id: str) -> list[BitemporalRecord]:
        """Every record for a subject, superseded ones included."""
        return [r for r in self._records if r.subject_id == subject_id]

    def all_current(self) -> list[BitemporalRecord]:
        return [r for r in self._records if r.time.is_current()]

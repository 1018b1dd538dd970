"""Timeline entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from temporal_engine.bitemporal.schemas import BitemporalRecord
from temporal_engine.core.ontology import TimeInterval


class TimelineEntry(BaseModel):
    """One version of a subject, valid over an interval."""

    model_config = ConfigDict(frozen=True)

    subject_id: str = Field(..., description="Subject identifier (e.g., statute ID)")
    interval: TimeInterval = Field(..., description="Validity window of this version")
    version: int = Field(..., ge=0, description="Version number")
    notes: str | None = None

    def with_notes(self, notes: str) -> TimelineEntry:
        return self.model_copy(update={"notes": notes})

    @classmethod
    def from_record(cls, record: BitemporalRecord) -> TimelineEntry:
        """Project a bitemporal record onto its valid-time window."""
        return cls(
            subject_id=record.subject_id,
            interval=record.time.valid_interval(),
            version=record.version,
        )

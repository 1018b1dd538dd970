"""Bitemporal time and record models.

Valid time says when a fact was true in reality; transaction time says when
the system knew it. A record whose ``transaction_to`` is unset is current.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from temporal_engine.core.ontology import TimeInterval


class BitemporalTime(BaseModel):
    """Valid-time window plus transaction-time window."""

    model_config = ConfigDict(frozen=True)

    valid_from: date = Field(..., description="First day the fact holds (inclusive)")
    valid_to: date = Field(..., description="Last day the fact holds (inclusive)")
    transaction_time: datetime = Field(..., description="When the fact was recorded")
    transaction_to: datetime | None = Field(
        None, description="When the record was superseded; None while current"
    )

    @model_validator(mode="after")
    def check_windows(self) -> BitemporalTime:
        if self.valid_from > self.valid_to:
            raise ValueError(
                f"valid_from must not be after valid_to ({self.valid_from} > {self.valid_to})"
            )
        if self.transaction_to is not None and self.transaction_to < self.transaction_time:
            raise ValueError("transaction_to must not precede transaction_time")
        return self

    def supersede(self, transaction_to: datetime) -> BitemporalTime:
        """Return a copy closed in transaction time at ``transaction_to``."""
        return BitemporalTime(
            valid_from=self.valid_from,
            valid_to=self.valid_to,
            transaction_time=self.transaction_time,
            transaction_to=transaction_to,
        )

    def is_currently_valid(self, as_of: date) -> bool:
        """Check whether ``as_of`` falls within the valid-time window."""
        return self.valid_from <= as_of <= self.valid_to

    def is_current(self) -> bool:
        """Check whether the record has not been superseded."""
        return self.transaction_to is None

    def valid_interval(self) -> TimeInterval:
        return TimeInterval(start=self.valid_from, end=self.valid_to)


class BitemporalRecord(BaseModel):
    """A versioned subject (e.g., a statute) with bitemporal bounds and payload."""

    model_config = ConfigDict(frozen=True)

    subject_id: str = Field(..., description="Subject identifier")
    version: int = Field(..., ge=0)
    time: BitemporalTime
    data: dict[str, str] = Field(default_factory=dict, description="Opaque payload")

    def with_data(self, key: str, value: str) -> BitemporalRecord:
        return self.model_copy(update={"data": {**self.data, key: value}})

    def supersede(self, transaction_to: datetime) -> BitemporalRecord:
        """Return a copy whose transaction window closes at ``transaction_to``."""
        return self.model_copy(update={"time": self.time.supersede(transaction_to)})

    def is_current(self) -> bool:
        return self.time.is_current()

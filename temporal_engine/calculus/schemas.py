"""Event and fluent types for event-calculus reasoning."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Kinds of legal events.

    Events outside this list are recorded with a free-text event type.
    """

    ENACTMENT = "enactment"
    AMENDMENT = "amendment"
    REPEAL = "repeal"
    DECISION = "decision"
    CONTRACT_SIGNING = "contract-signing"
    CONTRACT_TERMINATION = "contract-termination"


class LegalEvent(BaseModel):
    """A dated occurrence that may initiate or terminate fluents."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique event identifier")
    event_type: EventType | str = Field(..., description="Event kind or free-text custom kind")
    timestamp: datetime
    statute_id: str | None = Field(None, description="Statute the event concerns")
    case_id: str | None = Field(None, description="Case the event concerns")
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        """Display name of the event type."""
        if isinstance(self.event_type, EventType):
            return self.event_type.value
        return self.event_type

    def with_statute(self, statute_id: str) -> LegalEvent:
        return self.model_copy(update={"statute_id": statute_id})

    def with_case(self, case_id: str) -> LegalEvent:
        return self.model_copy(update={"case_id": case_id})

    def with_metadata(self, key: str, value: str) -> LegalEvent:
        return self.model_copy(update={"metadata": {**self.metadata, key: value}})


@total_ordering
class Fluent(BaseModel):
    """A named, parameterised proposition whose truth varies over time.

    Fluents compare by value and order by ``(name, args)`` so they can key
    sets and dictionaries.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[str, ...] = ()

    def with_arg(self, arg: str) -> Fluent:
        return self.model_copy(update={"args": (*self.args, arg)})

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fluent):
            return NotImplemented
        return (self.name, self.args) < (other.name, other.args)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.args)})"

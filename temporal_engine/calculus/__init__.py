"""Event calculus - fluents, legal events, and truth replay."""

from .schemas import EventType, Fluent, LegalEvent
from .service import EventCalculus

__all__ = [
    "EventCalculus",
    "EventType",
    "Fluent",
    "LegalEvent",
]

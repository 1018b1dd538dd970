"""Core ontology types shared by the timeline and bitemporal stores."""

from .intervals import (
    AllenRelation,
    TimeInterval,
    predecessor,
    successor,
)

__all__ = [
    "AllenRelation",
    "TimeInterval",
    "predecessor",
    "successor",
]

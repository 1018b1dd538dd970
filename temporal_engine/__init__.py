"""Legal Temporal Engine - temporal reasoning for statute and case histories.

This package provides the in-memory temporal core used by regulatory tooling:
Allen interval relations, event-calculus fluents, version timelines, and
bitemporal record history. All values are caller-supplied dates and
datetimes; nothing is persisted.

Environment Variables:
    TEMPORAL_LOG_LEVEL: Level applied by ``configure_logging()`` (default INFO).
    TEMPORAL_DEBUG: Set to "true" to force DEBUG logging.
    TEMPORAL_TIMELINES_DIR: Default directory for YAML version histories.
"""

import logging

# Core ontology and configuration
from .core import (
    AllenRelation,
    Settings,
    TimeInterval,
    get_settings,
    predecessor,
    successor,
)

# Event calculus
from .calculus import (
    EventCalculus,
    EventType,
    Fluent,
    LegalEvent,
)

# Timelines
from .timeline import (
    Timeline,
    TimelineEntry,
    TimelineLoader,
    TimelineLoadError,
)

# Bitemporal store
from .bitemporal import (
    BitemporalDatabase,
    BitemporalRecord,
    BitemporalTime,
    TemporalQuery,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "AllenRelation",
    "Settings",
    "TimeInterval",
    "get_settings",
    "predecessor",
    "successor",
    # Event calculus
    "EventCalculus",
    "EventType",
    "Fluent",
    "LegalEvent",
    # Timelines
    "Timeline",
    "TimelineEntry",
    "TimelineLoader",
    "TimelineLoadError",
    # Bitemporal
    "BitemporalDatabase",
    "BitemporalRecord",
    "BitemporalTime",
    "TemporalQuery",
]

"""Core package - Shared configuration, logging, and ontology types."""

from .config import Settings, get_settings
from .logging import PACKAGE_LOGGER, configure_logging
from .ontology import (
    AllenRelation,
    TimeInterval,
    predecessor,
    successor,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "PACKAGE_LOGGER",
    "configure_logging",
    # Ontology
    "AllenRelation",
    "TimeInterval",
    "predecessor",
    "successor",
]

"""Load statute version histories from YAML into a Timeline.

File format (a single mapping or a list of mappings)::

    subject_id: tax-law
    versions:
      - version: 1
        start: 2020-01-01
        end: 2022-12-31
        notes: Original enactment
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from temporal_engine.core.config import get_settings
from temporal_engine.core.ontology import TimeInterval
from temporal_engine.timeline.schemas import TimelineEntry
from temporal_engine.timeline.service import Timeline

logger = logging.getLogger(__name__)


class TimelineLoadError(Exception):
    """Raised when a version history file is malformed."""


class TimelineLoader:
    """Loads version histories from YAML files or directories."""

    def __init__(self, timelines_dir: str | Path | None = None):
        self.timelines_dir = Path(timelines_dir) if timelines_dir else None
        self.timeline = Timeline()

    def load_file(self, path: str | Path) -> list[TimelineEntry]:
        """Load entries from a single YAML file into the loader's timeline."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Timeline file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                content = yaml.safe_load(f)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise TimelineLoadError(f"Invalid YAML in {path}: {e}") from e

        documents = content if isinstance(content, list) else [content]

        entries = []
        for document in documents:
            entries.extend(self._parse_history(document, path))

        for entry in entries:
            self.timeline.add_entry(entry)

        logger.debug("Loaded %d entries from %s", len(entries), path)
        return entries

    def load_directory(self, path: str | Path | None = None) -> Timeline:
        """Load all YAML histories in a directory.

        Files that fail to load are skipped with a warning.
        """
        if path is not None:
            path = Path(path)
        elif self.timelines_dir is not None:
            path = self.timelines_dir
        else:
            configured = get_settings().timelines_dir
            path = Path(configured) if configured else None

        if not path:
            raise ValueError("No timelines directory specified")
        if not path.exists():
            raise FileNotFoundError(f"Timelines directory not found: {path}")

        files = sorted([*path.glob("*.yaml"), *path.glob("*.yml")])
        for yaml_file in files:
            try:
                self.load_file(yaml_file)
            except (TimelineLoadError, OSError) as e:
                logger.warning("Failed to load %s: %s", yaml_file, e)

        return self.timeline

    def _parse_history(self, data: Any, path: Path) -> list[TimelineEntry]:
        """Parse one subject's version history."""
        if not isinstance(data, dict):
            raise TimelineLoadError(f"{path}: expected a mapping, got {type(data).__name__}")

        subject_id = data.get("subject_id")
        if not subject_id:
            raise TimelineLoadError(f"{path}: missing 'subject_id'")

        versions = data.get("versions") or []
        if not isinstance(versions, list):
            raise TimelineLoadError(f"{path}: 'versions' must be a list")

        return [self._parse_version(str(subject_id), item, path) for item in versions]

    def _parse_version(self, subject_id: str, data: Any, path: Path) -> TimelineEntry:
        """Parse a single version block."""
        if not isinstance(data, dict):
            raise TimelineLoadError(f"{path}: version of {subject_id} must be a mapping")

        try:
            return TimelineEntry(
                subject_id=subject_id,
                interval=TimeInterval(start=data.get("start"), end=data.get("end")),
                version=data.get("version"),
                notes=data.get("notes"),
            )
        except ValidationError as e:
            raise TimelineLoadError(f"{path}: invalid version of {subject_id}: {e}") from e

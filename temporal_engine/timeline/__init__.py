"""Version timelines - entries, gap/overlap detection, and YAML loading."""

from .schemas import TimelineEntry
from .service import Timeline
from .loader import TimelineLoader, TimelineLoadError

__all__ = [
    "Timeline",
    "TimelineEntry",
    "TimelineLoader",
    "TimelineLoadError",
]

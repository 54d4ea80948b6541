"""Timeline access used by the colorizer."""

from multicam_colorizer.timeline.errors import TimelineUnavailableError
from multicam_colorizer.timeline.protocols import (
    TimelineClip,
    TimelineProvider,
    iter_timeline_clips,
)

__all__ = [
    "TimelineClip",
    "TimelineProvider",
    "TimelineUnavailableError",
    "iter_timeline_clips",
]

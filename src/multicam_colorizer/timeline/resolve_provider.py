"""Timeline provider for the DaVinci Resolve scripting API."""

import logging
from typing import Any

from multicam_colorizer.schemas import ClipColor, TrackType
from multicam_colorizer.timeline.errors import TimelineUnavailableError

logger = logging.getLogger(__name__)


def load_resolve() -> Any:
    """Acquire the Resolve scripting object.

    Raises:
        TimelineUnavailableError: If the scripting module cannot be imported or
            Resolve is not running.
    """
    try:
        import DaVinciResolveScript as dvr  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - only available inside Resolve
        msg = "DaVinciResolveScript module is not available. Did you set RESOLVE_SCRIPT_API?"
        raise TimelineUnavailableError(msg) from exc

    resolve = dvr.scriptapp("Resolve")
    if resolve is None:
        msg = "Resolve() object is not available"
        raise TimelineUnavailableError(msg)
    return resolve


class ResolveClip:
    """Adapter over a Resolve timeline item."""

    def __init__(self, item: Any) -> None:
        """Wrap a Resolve timeline item."""
        self._item = item

    def get_name(self) -> str | None:
        """Return the clip name."""
        return self._item.GetName()

    def set_color(self, color: ClipColor) -> bool:
        """Set the Resolve clip color."""
        return bool(self._item.SetClipColor(str(color)))


class ResolveTimelineProvider:
    """Expose the tracks of a Resolve timeline."""

    def __init__(self, timeline: Any) -> None:
        """Initialize from a Resolve timeline object."""
        self._timeline = timeline

    @classmethod
    def from_current_timeline(cls, resolve: Any | None = None) -> "ResolveTimelineProvider":
        """Use the active timeline of the current Resolve project.

        Raises:
            TimelineUnavailableError: If Resolve, an open project or an active
                timeline is missing.
        """
        if resolve is None:
            resolve = load_resolve()

        project_manager = resolve.GetProjectManager()
        project = project_manager.GetCurrentProject() if project_manager else None
        if not project:
            msg = "No project open"
            raise TimelineUnavailableError(msg)

        timeline = project.GetCurrentTimeline()
        if not timeline:
            msg = "No active timeline"
            raise TimelineUnavailableError(msg)

        logger.info("Using Resolve timeline %r", timeline.GetName())
        return cls(timeline)

    def track_count(self, track_type: TrackType) -> int:
        """Return the number of tracks of the given type."""
        return int(self._timeline.GetTrackCount(str(track_type)) or 0)

    def clips_in_track(self, track_type: TrackType, track_index: int) -> list[ResolveClip]:
        """Return the clips of a 1-based track."""
        items = self._timeline.GetItemListInTrack(str(track_type), track_index) or []
        return [ResolveClip(item) for item in items]

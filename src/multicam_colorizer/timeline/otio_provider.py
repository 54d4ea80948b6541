"""Timeline provider backed by an OpenTimelineIO timeline."""

import logging
from pathlib import Path

import opentimelineio as otio

from multicam_colorizer.schemas import ClipColor, TrackType
from multicam_colorizer.timeline.errors import TimelineUnavailableError

logger = logging.getLogger(__name__)

METADATA_KEY = "multicam_colorizer"


class OTIOClip:
    """Clip adapter storing the color label in OTIO clip metadata."""

    def __init__(self, clip: otio.schema.Clip) -> None:
        """Wrap an OTIO clip."""
        self._clip = clip

    def get_name(self) -> str | None:
        """Return the clip name."""
        return self._clip.name

    def set_color(self, color: ClipColor) -> bool:
        """Record the clip color in the clip metadata."""
        self._clip.metadata[METADATA_KEY] = {"clip_color": str(color)}
        return True

    @property
    def color(self) -> ClipColor | None:
        """Return the color recorded on the clip, if any."""
        data = self._clip.metadata.get(METADATA_KEY)
        if not data or "clip_color" not in data:
            return None
        return ClipColor(data["clip_color"])


class OTIOTimelineProvider:
    """Expose the video and audio tracks of an OTIO timeline."""

    def __init__(self, timeline: otio.schema.Timeline) -> None:
        """Initialize from an in-memory timeline."""
        self._timeline = timeline
        self._tracks: dict[TrackType, list[otio.schema.Track]] = {
            TrackType.VIDEO: list(timeline.video_tracks()),
            TrackType.AUDIO: list(timeline.audio_tracks()),
        }

    @classmethod
    def from_timeline(cls, timeline: otio.schema.Timeline) -> "OTIOTimelineProvider":
        """Use an in-memory timeline.

        Raises:
            TimelineUnavailableError: If the object is not a timeline.
        """
        if not isinstance(timeline, otio.schema.Timeline):
            msg = f"Expected an OTIO timeline, got {type(timeline).__name__}"
            raise TimelineUnavailableError(msg)
        return cls(timeline)

    @classmethod
    def from_file(cls, otio_path: Path) -> "OTIOTimelineProvider":
        """Read a timeline file.

        Raises:
            TimelineUnavailableError: If the file does not exist or holds no
                timeline.
        """
        if not otio_path.exists():
            msg = f"Timeline file not found: {otio_path}"
            raise TimelineUnavailableError(msg)

        timeline = otio.adapters.read_from_file(str(otio_path))
        if not isinstance(timeline, otio.schema.Timeline):
            msg = f"No timeline in {otio_path}"
            raise TimelineUnavailableError(msg)

        logger.info("Loaded timeline %r from %s", timeline.name, otio_path)
        return cls.from_timeline(timeline)

    @property
    def timeline(self) -> otio.schema.Timeline:
        """Return the wrapped timeline."""
        return self._timeline

    def track_count(self, track_type: TrackType) -> int:
        """Return the number of tracks of the given type."""
        return len(self._tracks[track_type])

    def clips_in_track(self, track_type: TrackType, track_index: int) -> list[OTIOClip]:
        """Return the clips of a 1-based track, skipping gaps and transitions."""
        track = self._tracks[track_type][track_index - 1]
        return [OTIOClip(item) for item in track if isinstance(item, otio.schema.Clip)]

    def save(self, output_path: Path) -> Path:
        """Write the timeline, including recorded colors, to a file."""
        otio.adapters.write_to_file(self._timeline, str(output_path))
        logger.info("Wrote colored timeline to %s", output_path)
        return output_path

"""Interfaces a host timeline must provide to be colorized."""

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from multicam_colorizer.schemas import TRACK_TYPES, ClipColor, TrackType


@runtime_checkable
class TimelineClip(Protocol):
    """A clip on a timeline track."""

    def get_name(self) -> str | None:
        """Return the clip name."""
        ...

    def set_color(self, color: ClipColor) -> bool:
        """Set the clip color label, returning True on success."""
        ...


@runtime_checkable
class TimelineProvider(Protocol):
    """Track and clip access for one timeline.

    Track indices are 1-based, matching host editing applications.
    """

    def track_count(self, track_type: TrackType) -> int:
        """Return the number of tracks of the given type."""
        ...

    def clips_in_track(
        self, track_type: TrackType, track_index: int
    ) -> Sequence[TimelineClip]:
        """Return the clips of one track in timeline order."""
        ...


def iter_track_clips(
    provider: TimelineProvider, track_type: TrackType
) -> Iterator[TimelineClip]:
    """Yield every clip on every track of one type."""
    for track_index in range(1, provider.track_count(track_type) + 1):
        yield from provider.clips_in_track(track_type, track_index) or ()


def iter_timeline_clips(provider: TimelineProvider) -> Iterator[TimelineClip]:
    """Yield every clip on the timeline, video tracks first, then audio."""
    for track_type in TRACK_TYPES:
        yield from iter_track_clips(provider, track_type)

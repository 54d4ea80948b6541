"""Shared pytest fixtures for multicam colorizer tests."""

from __future__ import annotations

import opentimelineio as otio
import pytest

from multicam_colorizer.schemas import ClipColor, TrackType

# ============================================================================
# Fake timeline
# ============================================================================


class FakeClip:
    """Clip double that records every color request."""

    def __init__(self, name: str | None, accept: bool = True) -> None:
        self.name = name
        self.accept = accept
        self.color_calls: list[ClipColor] = []

    def get_name(self) -> str | None:
        return self.name

    def set_color(self, color: ClipColor) -> bool:
        self.color_calls.append(color)
        return self.accept


class FakeTimelineProvider:
    """Provider double holding tracks as lists of FakeClip."""

    def __init__(
        self,
        video: list[list[FakeClip]] | None = None,
        audio: list[list[FakeClip]] | None = None,
    ) -> None:
        self.tracks = {
            TrackType.VIDEO: video or [],
            TrackType.AUDIO: audio or [],
        }

    def track_count(self, track_type: TrackType) -> int:
        return len(self.tracks[track_type])

    def clips_in_track(self, track_type: TrackType, track_index: int) -> list[FakeClip]:
        return self.tracks[track_type][track_index - 1]

    @property
    def all_clips(self) -> list[FakeClip]:
        return [clip for tracks in self.tracks.values() for track in tracks for clip in track]


@pytest.fixture
def multicam_provider() -> FakeTimelineProvider:
    """Two video tracks and one audio track from a three camera shoot."""
    return FakeTimelineProvider(
        video=[
            [FakeClip("Angle 1 take1"), FakeClip("b-roll"), FakeClip("Angle 3")],
            [FakeClip("Cam2"), FakeClip("")],
        ],
        audio=[
            [FakeClip("Multicam - Audio 1"), FakeClip("Music")],
        ],
    )


# ============================================================================
# OTIO fixtures
# ============================================================================


def _otio_clip(name: str) -> otio.schema.Clip:
    return otio.schema.Clip(
        name=name,
        source_range=otio.opentime.TimeRange(
            start_time=otio.opentime.RationalTime(0, 24),
            duration=otio.opentime.RationalTime(48, 24),
        ),
    )


@pytest.fixture
def otio_timeline() -> otio.schema.Timeline:
    """Timeline with a video and an audio track, including a gap."""
    timeline = otio.schema.Timeline(name="Multicam Edit")

    video_track = otio.schema.Track(name="V1", kind=otio.schema.TrackKind.Video)
    video_track.append(_otio_clip("Multicam - Video 1"))
    video_track.append(
        otio.schema.Gap(
            source_range=otio.opentime.TimeRange(
                duration=otio.opentime.RationalTime(24, 24),
            )
        )
    )
    video_track.append(_otio_clip("Multicam - Video 2"))
    video_track.append(_otio_clip("Titles"))
    timeline.tracks.append(video_track)

    audio_track = otio.schema.Track(name="A1", kind=otio.schema.TrackKind.Audio)
    audio_track.append(_otio_clip("Multicam - Audio 2"))
    timeline.tracks.append(audio_track)

    return timeline

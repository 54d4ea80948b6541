"""Track-related schemas."""

from enum import StrEnum, auto


class TrackType(StrEnum):
    """Type of track in a timeline."""

    VIDEO = auto()
    AUDIO = auto()


# Clips are always visited video first, then audio
TRACK_TYPES: tuple[TrackType, ...] = (TrackType.VIDEO, TrackType.AUDIO)

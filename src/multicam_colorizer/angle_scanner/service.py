"""Angle scanner service."""

import logging
from collections.abc import Iterable

from multicam_colorizer.angle_detector import detect_angle, format_angle_label
from multicam_colorizer.timeline import TimelineProvider, iter_timeline_clips

logger = logging.getLogger(__name__)

# Angles offered when nothing was detected on the timeline
DEFAULT_ANGLE_COUNT = 10
DEFAULT_ANGLES: tuple[int, ...] = tuple(range(1, DEFAULT_ANGLE_COUNT + 1))


class AngleScannerService:
    """Service for collecting the distinct angles present among clips."""

    def scan(self, clip_names: Iterable[str | None]) -> set[int]:
        """Detect the angle of every clip name and collect the distinct results."""
        angles: set[int] = set()
        for name in clip_names:
            angle = detect_angle(name)
            if angle is not None:
                angles.add(angle)
        return angles

    def sorted_angles(self, clip_names: Iterable[str | None]) -> list[int]:
        """Return the distinct angles in ascending order."""
        return sorted(self.scan(clip_names))

    def scan_timeline(self, provider: TimelineProvider) -> set[int]:
        """Scan the clips of every video and audio track of a timeline."""
        angles = self.scan(clip.get_name() for clip in iter_timeline_clips(provider))
        logger.info("Found %d angles on timeline", len(angles))
        return angles

    def sorted_timeline_angles(self, provider: TimelineProvider) -> list[int]:
        """Return the timeline's distinct angles in ascending order."""
        return sorted(self.scan_timeline(provider))

    def angle_options(self, angles: Iterable[int]) -> list[str]:
        """Return selector labels for the given angles.

        Falls back to the default range 1..10 when no angles are given, so a
        form can still be filled in by hand.
        """
        ordered = sorted(set(angles)) or list(DEFAULT_ANGLES)
        return [format_angle_label(angle) for angle in ordered]

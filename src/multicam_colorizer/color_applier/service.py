"""Color applier service."""

import logging

from multicam_colorizer.angle_detector import detect_angle
from multicam_colorizer.schemas import TRACK_TYPES, AngleColorMapping, ApplyResult
from multicam_colorizer.timeline import TimelineProvider
from multicam_colorizer.timeline.protocols import iter_track_clips

logger = logging.getLogger(__name__)


class ColorApplierService:
    """Service for setting clip colors on a timeline from an angle mapping."""

    def apply(
        self, mapping: AngleColorMapping, provider: TimelineProvider
    ) -> ApplyResult:
        """Color every clip whose detected angle has a mapped color.

        Clips are re-scanned on every call, so applying the same mapping twice
        issues the same color requests both times.

        Args:
            mapping: Angle to color mapping to apply.
            provider: Timeline whose video and audio clips are colored.

        Returns:
            Counts of colored, skipped and failed clips. Only clips the
            provider acknowledged are counted as colored.
        """
        applied = 0
        skipped = 0
        failed = 0

        for track_type in TRACK_TYPES:
            for clip in iter_track_clips(provider, track_type):
                name = clip.get_name()
                color = mapping.color_for(detect_angle(name))
                if color is None:
                    skipped += 1
                    continue

                if clip.set_color(color):
                    applied += 1
                else:
                    failed += 1
                    logger.warning(
                        "Failed to set color %s on %s clip %r", color, track_type, name
                    )

        result = ApplyResult(
            applied_count=applied, skipped_count=skipped, failed_count=failed
        )
        logger.info("%s", result.status_message)
        return result

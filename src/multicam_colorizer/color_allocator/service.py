"""Color allocator service."""

import logging
from collections.abc import Iterable, Sequence

from multicam_colorizer.angle_detector import format_angle_label, parse_angle_label
from multicam_colorizer.angle_scanner.service import DEFAULT_ANGLES
from multicam_colorizer.color_allocator.palette_cursor import AutomaticPaletteCursor
from multicam_colorizer.schemas import (
    PALETTE,
    PREFERRED_ANGLE_COLORS,
    AllocationContext,
    AllocationMode,
    AngleColorMapping,
    AngleColorSelection,
    ClipColor,
    parse_clip_color,
)

logger = logging.getLogger(__name__)


class ColorAllocatorService:
    """Service for mapping angle indices to clip colors."""

    def allocate(
        self, mode: AllocationMode, context: AllocationContext
    ) -> AngleColorMapping:
        """Build the angle to color mapping for a mode.

        Args:
            mode: Which allocation mode to run.
            context: Discovered angles (Automatic) and form selections
                (Manual and Individual).

        Returns:
            The mapping. It may be empty or partial when selections are
            bypassed or invalid; the allocator never raises for those.
        """
        logger.debug("Allocating colors in %s mode", mode)
        if mode == AllocationMode.INDIVIDUAL:
            return self.build_individual(context.selections[:1])
        if mode == AllocationMode.MANUAL:
            return self.build_from_selections(context.selections)
        return self.build_automatic(context.found_angles)

    def build_automatic(self, sorted_angles: Sequence[int]) -> AngleColorMapping:
        """Assign preferred or unused palette colors to angles in ascending order.

        An empty angle list is replaced by the default angles 1..10.
        """
        angles = sorted(set(sorted_angles)) or list(DEFAULT_ANGLES)
        cursor = AutomaticPaletteCursor()
        colors = {angle: cursor.choose(angle) for angle in angles}
        logger.debug("Automatic mapping built for %d angles", len(colors))
        return AngleColorMapping(colors=colors)

    def build_from_selections(
        self, selections: Iterable[AngleColorSelection]
    ) -> AngleColorMapping:
        """Apply selection rows in order; a later row overwrites an earlier one."""
        colors: dict[int, ClipColor] = {}
        for row_index, selection in enumerate(selections, start=1):
            parsed = self._parse_selection(selection)
            if parsed is None:
                logger.debug("Skipping selection row %d: %r", row_index, selection)
                continue
            angle, color = parsed
            colors[angle] = color
        return AngleColorMapping(colors=colors)

    def build_individual(
        self, selections: Sequence[AngleColorSelection]
    ) -> AngleColorMapping:
        """Apply a single selection row."""
        return self.build_from_selections(selections[:1])

    def default_selections(self, found_angles: Iterable[int]) -> list[AngleColorSelection]:
        """Return the pre-filled Manual rows for the discovered angles.

        One row per angle (or per default angle when none were found). Row N
        starts with the preferred color for angle index N, else the first
        palette color.
        """
        angles = sorted(set(found_angles)) or list(DEFAULT_ANGLES)
        return [
            AngleColorSelection(
                angle_label=format_angle_label(angle),
                color_name=PREFERRED_ANGLE_COLORS.get(row_index, PALETTE[0]).value,
            )
            for row_index, angle in enumerate(angles, start=1)
        ]

    def _parse_selection(
        self, selection: AngleColorSelection
    ) -> tuple[int, ClipColor] | None:
        if selection.is_bypassed:
            return None
        angle = parse_angle_label(selection.angle_label)
        color = parse_clip_color(selection.color_name)
        if angle is None or color is None:
            return None
        return angle, color

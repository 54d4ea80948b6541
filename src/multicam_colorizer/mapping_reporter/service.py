"""Mapping reporter service."""

import logging

from multicam_colorizer.schemas import (
    PALETTE_SIZE,
    AngleColorMapping,
    ClipColor,
    DuplicateColorGroup,
    MappingReport,
    ReportClassification,
)

logger = logging.getLogger(__name__)

DUPLICATES_WARNING = "Duplicate colors detected; consider switching to Manual mode."


class MappingReporterService:
    """Service for validating a finished mapping and describing it."""

    def __init__(self, palette_size: int = PALETTE_SIZE) -> None:
        """Initialize the reporter."""
        self._palette_size = palette_size

    def report(self, mapping: AngleColorMapping) -> MappingReport:
        """Check a mapping for shared colors and build its diagnostic summary.

        Args:
            mapping: The angle to color mapping to check.

        Returns:
            A MappingReport. Advisory only: nothing here prevents applying.
        """
        angles = mapping.sorted_angles
        color_to_angles: dict[ClipColor, list[int]] = {}
        for angle in angles:
            color_to_angles.setdefault(mapping.colors[angle], []).append(angle)

        # Angles are visited ascending, so groups are ordered by first angle
        duplicate_groups = [
            DuplicateColorGroup(color=color, angles=group)
            for color, group in color_to_angles.items()
            if len(group) > 1
        ]
        unique_color_count = len(color_to_angles)

        if len(angles) > self._palette_size:
            classification = ReportClassification.UNAVOIDABLE_REPEATS
            warning: str | None = (
                f"{len(angles)} angles detected but only {self._palette_size} "
                "colors available; repeats are unavoidable."
            )
        elif duplicate_groups:
            classification = ReportClassification.DUPLICATES
            warning = DUPLICATES_WARNING
        else:
            classification = ReportClassification.OK
            warning = None

        lines = ["Angle -> Color mapping:"]
        lines.extend(f"  Angle {angle} -> {mapping.colors[angle]}" for angle in angles)
        lines.extend(
            "Duplicate color '{}' for angles: {}".format(
                group.color, ", ".join(str(a) for a in group.angles)
            )
            for group in duplicate_groups
        )
        if warning:
            lines.append(warning)
        lines.append(
            f"{len(angles)} angles mapped using {unique_color_count} unique colors."
        )

        return MappingReport(
            angle_count=len(angles),
            unique_color_count=unique_color_count,
            duplicate_groups=duplicate_groups,
            classification=classification,
            lines=lines,
            warning=warning,
        )

    def log_report(self, report: MappingReport) -> None:
        """Write a report to the log, warnings at WARNING level."""
        logger.info("Angle -> Color mapping:")
        for line in report.lines[1:-1]:
            if line == report.warning or line.startswith("Duplicate color"):
                logger.warning("%s", line)
            else:
                logger.info("%s", line.strip())
        logger.info("%s", report.lines[-1])

"""Colorizer service tying scan, allocation, reporting and apply together."""

import logging
from collections.abc import Sequence

from multicam_colorizer.angle_scanner.service import AngleScannerService
from multicam_colorizer.color_allocator.service import ColorAllocatorService
from multicam_colorizer.color_applier.service import ColorApplierService
from multicam_colorizer.mapping_reporter.service import MappingReporterService
from multicam_colorizer.schemas import (
    AllocationContext,
    AllocationMode,
    AngleColorMapping,
    AngleColorSelection,
    ApplyResult,
    MappingReport,
)
from multicam_colorizer.timeline import TimelineProvider

logger = logging.getLogger(__name__)


class ColorizerService:
    """Service for colorizing a multicam timeline in one pass."""

    def __init__(
        self,
        scanner: AngleScannerService,
        allocator: ColorAllocatorService,
        reporter: MappingReporterService,
        applier: ColorApplierService,
    ) -> None:
        """Initialize the colorizer service."""
        self._scanner = scanner
        self._allocator = allocator
        self._reporter = reporter
        self._applier = applier

    def build_mapping(
        self,
        provider: TimelineProvider,
        mode: AllocationMode,
        selections: Sequence[AngleColorSelection] | None = None,
    ) -> AngleColorMapping:
        """Scan the timeline and allocate colors for a mode.

        Manual and Individual modes without explicit selections use the rows a
        form would be pre-filled with for the discovered angles.
        """
        found_angles = self._scanner.sorted_timeline_angles(provider)
        if selections is None:
            selections = self._allocator.default_selections(found_angles)

        context = AllocationContext(
            found_angles=found_angles, selections=list(selections)
        )
        return self._allocator.allocate(mode, context)

    def preview(
        self,
        provider: TimelineProvider,
        mode: AllocationMode,
        selections: Sequence[AngleColorSelection] | None = None,
    ) -> MappingReport:
        """Return the mapping report without touching any clip."""
        mapping = self.build_mapping(provider, mode, selections)
        return self._reporter.report(mapping)

    def colorize(
        self,
        provider: TimelineProvider,
        mode: AllocationMode,
        selections: Sequence[AngleColorSelection] | None = None,
    ) -> ApplyResult:
        """Build the mapping, log its report and color the timeline clips."""
        logger.info("Colorizing timeline in %s mode", mode)
        mapping = self.build_mapping(provider, mode, selections)

        # Report is logged before any clip is colored
        self._reporter.log_report(self._reporter.report(mapping))
        return self._applier.apply(mapping, provider)

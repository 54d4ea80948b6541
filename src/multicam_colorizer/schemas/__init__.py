"""Multicam colorizer schemas."""

from multicam_colorizer.schemas.allocation import (
    BYPASS,
    AllocationContext,
    AllocationMode,
    AngleColorSelection,
)
from multicam_colorizer.schemas.apply_result import ApplyResult
from multicam_colorizer.schemas.clip_color import (
    PALETTE,
    PALETTE_SIZE,
    PREFERRED_ANGLE_COLORS,
    ClipColor,
    parse_clip_color,
)
from multicam_colorizer.schemas.mapping import AngleColorMapping
from multicam_colorizer.schemas.report import (
    DuplicateColorGroup,
    MappingReport,
    ReportClassification,
)
from multicam_colorizer.schemas.track import TRACK_TYPES, TrackType

__all__ = [
    "BYPASS",
    "PALETTE",
    "PALETTE_SIZE",
    "PREFERRED_ANGLE_COLORS",
    "TRACK_TYPES",
    "AllocationContext",
    "AllocationMode",
    "AngleColorMapping",
    "AngleColorSelection",
    "ApplyResult",
    "ClipColor",
    "DuplicateColorGroup",
    "MappingReport",
    "ReportClassification",
    "TrackType",
    "parse_clip_color",
]

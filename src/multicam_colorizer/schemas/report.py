"""Mapping report schemas."""

from enum import StrEnum, auto

from multicam_colorizer.common.base_colorizer_model import BaseColorizerModel
from multicam_colorizer.schemas.clip_color import ClipColor


class ReportClassification(StrEnum):
    """Overall verdict on a finished mapping."""

    OK = auto()
    DUPLICATES = auto()
    UNAVOIDABLE_REPEATS = auto()


class DuplicateColorGroup(BaseColorizerModel):
    """A color assigned to more than one angle."""

    color: ClipColor
    angles: list[int]


class MappingReport(BaseColorizerModel):
    """Diagnostic summary of an angle to color mapping."""

    angle_count: int
    unique_color_count: int
    duplicate_groups: list[DuplicateColorGroup]
    classification: ReportClassification
    lines: list[str]
    warning: str | None = None

    @property
    def has_duplicates(self) -> bool:
        """Return True when any color is shared between angles."""
        return bool(self.duplicate_groups)

    @property
    def text(self) -> str:
        """Return the report as printable text."""
        return "\n".join(self.lines)

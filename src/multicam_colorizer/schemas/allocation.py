"""Color allocation input schemas."""

from enum import StrEnum, auto

from pydantic import Field, field_validator

from multicam_colorizer.common.base_colorizer_model import BaseColorizerModel

BYPASS = "Bypass"


class AllocationMode(StrEnum):
    """How angles are mapped to colors."""

    AUTOMATIC = auto()
    MANUAL = auto()
    INDIVIDUAL = auto()

    @classmethod
    def _missing_(cls, value: object) -> "AllocationMode | None":
        # Form text arrives capitalized ("Automatic")
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class AngleColorSelection(BaseColorizerModel):
    """One (angle selector, color selector) pair as chosen on a form.

    Both values are kept as the raw selector text, e.g. ("Angle 3", "Teal")
    or ("Bypass", "").
    """

    angle_label: str = BYPASS
    color_name: str | None = None

    @property
    def is_bypassed(self) -> bool:
        """Return True when the row is excluded from the mapping."""
        return self.angle_label == BYPASS or not self.color_name


class AllocationContext(BaseColorizerModel):
    """Everything an allocation mode may read."""

    found_angles: list[int] = Field(default_factory=list)
    selections: list[AngleColorSelection] = Field(default_factory=list)

    @field_validator("found_angles")
    @classmethod
    def _sort_found_angles(cls, value: list[int]) -> list[int]:
        return sorted(set(value))

"""Angle to color mapping schema."""

from pydantic import PositiveInt

from multicam_colorizer.common.base_colorizer_model import BaseColorizerModel
from multicam_colorizer.schemas.clip_color import ClipColor


class AngleColorMapping(BaseColorizerModel):
    """Mapping from angle index to the clip color assigned to it.

    Keys carry no meaningful order; use `sorted_angles` when iterating.
    """

    colors: dict[PositiveInt, ClipColor] = {}

    @property
    def sorted_angles(self) -> list[int]:
        """Return mapped angles in ascending order."""
        return sorted(self.colors)

    @property
    def unique_colors(self) -> set[ClipColor]:
        """Return the distinct colors used by this mapping."""
        return set(self.colors.values())

    def color_for(self, angle: int | None) -> ClipColor | None:
        """Return the color mapped to an angle, or None."""
        if angle is None:
            return None
        return self.colors.get(angle)

    def __len__(self) -> int:
        return len(self.colors)

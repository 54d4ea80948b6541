"""Clip color palette schemas."""

from enum import StrEnum
from types import MappingProxyType


class ClipColor(StrEnum):
    """Clip colors available on the host timeline.

    Values are the exact color names the host accepts, in palette order.
    """

    ORANGE = "Orange"
    APRICOT = "Apricot"
    YELLOW = "Yellow"
    LIME = "Lime"
    OLIVE = "Olive"
    GREEN = "Green"
    TEAL = "Teal"
    NAVY = "Navy"
    BLUE = "Blue"
    PURPLE = "Purple"
    VIOLET = "Violet"
    PINK = "Pink"
    TAN = "Tan"
    BEIGE = "Beige"
    BROWN = "Brown"
    CHOCOLATE = "Chocolate"


# Cycling is defined over this order
PALETTE: tuple[ClipColor, ...] = tuple(ClipColor)
PALETTE_SIZE = len(PALETTE)

# Preferred color per angle index (1-based)
PREFERRED_ANGLE_COLORS = MappingProxyType(
    {
        1: ClipColor.ORANGE,
        2: ClipColor.GREEN,
        3: ClipColor.YELLOW,
        4: ClipColor.BLUE,
        5: ClipColor.PURPLE,
        6: ClipColor.TEAL,
        7: ClipColor.PINK,
        8: ClipColor.BROWN,
    }
)


def parse_clip_color(text: str | None) -> ClipColor | None:
    """Return the palette color named exactly by text, or None."""
    if not text:
        return None
    try:
        return ClipColor(text)
    except ValueError:
        return None

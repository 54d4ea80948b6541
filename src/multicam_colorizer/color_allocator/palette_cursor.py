"""Cyclic palette cursor used by automatic allocation."""

from multicam_colorizer.schemas import PALETTE, PREFERRED_ANGLE_COLORS, ClipColor


class AutomaticPaletteCursor:
    """Hands out palette colors, avoiding repeats until the palette runs out.

    One cursor is created per allocation run. The pointer advances on every
    palette lookup, so once all colors are used the assignments become a stable
    round-robin over the palette.
    """

    def __init__(self, palette: tuple[ClipColor, ...] = PALETTE) -> None:
        """Initialize the cursor at the first palette entry."""
        self._palette = palette
        self._position = 0
        self.used: set[ClipColor] = set()

    @property
    def position(self) -> int:
        """Return the 0-based palette index the next lookup reads."""
        return self._position

    def choose(self, angle: int) -> ClipColor:
        """Return the color for an angle and mark it used."""
        preferred = PREFERRED_ANGLE_COLORS.get(angle)
        if preferred is not None and preferred not in self.used:
            chosen = preferred
        else:
            chosen = self._next_unused()
        self.used.add(chosen)
        return chosen

    def _next_unused(self) -> ClipColor:
        for _ in range(len(self._palette)):
            color = self._advance()
            if color not in self.used:
                return color
        # Palette exhausted: repeats are allowed from here on
        return self._advance()

    def _advance(self) -> ClipColor:
        color = self._palette[self._position]
        self._position = (self._position + 1) % len(self._palette)
        return color

"""Infer a camera angle index from a free-form clip name."""

import logging
import re

logger = logging.getLogger(__name__)

# Patterns for extracting angle numbers from lowercased clip names.
# Order is priority: the first pattern that matches decides the result.
ANGLE_PATTERNS = [
    re.compile(r"angle[\s\-_]*(\d+)", re.ASCII),  # Angle 1, Angle_2, Angle-3
    re.compile(r"cam(?:era)?[\s\-_]*(\d+)", re.ASCII),  # Cam 1, Camera2, Cam-3
    re.compile(r"multicam[\s\-_.]*?\s*video[\s\-_]*(\d+)", re.ASCII),  # Multicam - Video 1
    re.compile(r"video[\s\-_]*(\d+)", re.ASCII),  # Video 1, Video_3
    re.compile(r"audio[\s\-_]*(\d+)", re.ASCII),  # Clip Name - Audio 1, Audio-4
    re.compile(r"[\s\-_]a(\d+)", re.ASCII),  # _A2, -A3 (not inside a longer word)
    re.compile(r"^a(\d+)", re.ASCII),  # A1 Some text
]

ANGLE_LABEL_PATTERN = re.compile(r"^Angle (\d+)$", re.ASCII)


def detect_angle(name: str | None) -> int | None:
    """Detect the angle index encoded in a clip name.

    Args:
        name: The clip name as reported by the timeline. May be empty or None.

    Returns:
        A positive angle index, or None when no pattern matches or the matched
        number is below 1.
    """
    if not name:
        return None

    lower = name.lower()
    for pattern in ANGLE_PATTERNS:
        match = pattern.search(lower)
        if match:
            return _to_angle_index(match.group(1))

    logger.debug("No angle detected in clip name %r", name)
    return None


def _to_angle_index(digits: str) -> int | None:
    """Convert captured digits to an angle index, rejecting zero."""
    try:
        value = int(digits)
    except ValueError:
        return None
    return value if value >= 1 else None


def format_angle_label(angle: int) -> str:
    """Return the selector label for an angle, e.g. "Angle 3"."""
    return f"Angle {angle}"


def parse_angle_label(label: str | None) -> int | None:
    """Parse a selector label produced by `format_angle_label`.

    "Bypass" and any other text that is not an angle label yield None.
    """
    if not label:
        return None
    match = ANGLE_LABEL_PATTERN.match(label.strip())
    if not match:
        return None
    return _to_angle_index(match.group(1))

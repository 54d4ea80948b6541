"""Angle detection from clip names."""

from multicam_colorizer.angle_detector.detect import (
    detect_angle,
    format_angle_label,
    parse_angle_label,
)

__all__ = ["detect_angle", "format_angle_label", "parse_angle_label"]

"""Colorize multicam timeline clips by the camera angle detected in their names."""

__version__ = "0.1.0"

"""Providers for angle scanner service."""

from functools import cache

from multicam_colorizer.angle_scanner.service import AngleScannerService


@cache
def angle_scanner_service() -> AngleScannerService:
    """Provide a cached instance of the AngleScannerService."""
    return AngleScannerService()

"""Providers for color applier service."""

from functools import cache

from multicam_colorizer.color_applier.service import ColorApplierService


@cache
def color_applier_service() -> ColorApplierService:
    """Provide a cached instance of the ColorApplierService."""
    return ColorApplierService()

"""Providers for color allocator service."""

from functools import cache

from multicam_colorizer.color_allocator.service import ColorAllocatorService


@cache
def color_allocator_service() -> ColorAllocatorService:
    """Provide a cached instance of the ColorAllocatorService."""
    return ColorAllocatorService()

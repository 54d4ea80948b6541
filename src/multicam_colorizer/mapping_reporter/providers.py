"""Providers for mapping reporter service."""

from functools import cache

from multicam_colorizer.mapping_reporter.service import MappingReporterService


@cache
def mapping_reporter_service() -> MappingReporterService:
    """Provide a cached instance of the MappingReporterService."""
    return MappingReporterService()

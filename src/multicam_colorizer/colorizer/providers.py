"""Providers for colorizer service."""

from functools import cache

from multicam_colorizer.angle_scanner.providers import angle_scanner_service
from multicam_colorizer.color_allocator.providers import color_allocator_service
from multicam_colorizer.color_applier.providers import color_applier_service
from multicam_colorizer.colorizer.service import ColorizerService
from multicam_colorizer.mapping_reporter.providers import mapping_reporter_service


@cache
def colorizer_service() -> ColorizerService:
    """Provide a cached instance of the ColorizerService."""
    return ColorizerService(
        scanner=angle_scanner_service(),
        allocator=color_allocator_service(),
        reporter=mapping_reporter_service(),
        applier=color_applier_service(),
    )

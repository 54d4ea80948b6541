"""Tests for the colorizer service."""

import pytest

from multicam_colorizer.colorizer.providers import colorizer_service
from multicam_colorizer.schemas import (
    AllocationMode,
    AngleColorSelection,
    ClipColor,
    ReportClassification,
)


@pytest.fixture
def service():
    return colorizer_service()


def test_colorize_automatic(service, multicam_provider):
    """Test a full automatic run."""
    result = service.colorize(multicam_provider, AllocationMode.AUTOMATIC)

    first_video_track = multicam_provider.tracks["video"][0]
    assert first_video_track[0].color_calls == [ClipColor.ORANGE]
    assert first_video_track[2].color_calls == [ClipColor.YELLOW]
    assert multicam_provider.tracks["video"][1][0].color_calls == [ClipColor.GREEN]
    assert result.applied_count == 4


def test_colorize_manual_with_selections(service, multicam_provider):
    """Test that only the selected angles are colored."""
    selections = [
        AngleColorSelection(angle_label="Angle 3", color_name="Violet"),
        AngleColorSelection(angle_label="Bypass", color_name="Orange"),
    ]
    result = service.colorize(multicam_provider, AllocationMode.MANUAL, selections)

    assert result.applied_count == 1
    assert multicam_provider.tracks["video"][0][2].color_calls == [ClipColor.VIOLET]


def test_manual_defaults_to_prefilled_rows(service, multicam_provider):
    """Test manual mode without explicit rows."""
    mapping = service.build_mapping(multicam_provider, AllocationMode.MANUAL)
    assert mapping.colors == {
        1: ClipColor.ORANGE,
        2: ClipColor.GREEN,
        3: ClipColor.YELLOW,
    }


def test_individual_defaults_to_first_angle(service, multicam_provider):
    """Test individual mode without an explicit row."""
    mapping = service.build_mapping(multicam_provider, AllocationMode.INDIVIDUAL)
    assert mapping.colors == {1: ClipColor.ORANGE}


def test_preview_does_not_color(service, multicam_provider):
    """Test that previewing leaves every clip untouched."""
    report = service.preview(multicam_provider, AllocationMode.AUTOMATIC)

    assert report.classification == ReportClassification.OK
    assert report.angle_count == 3
    assert all(clip.color_calls == [] for clip in multicam_provider.all_clips)

"""Tests for the angle scanner service."""

from multicam_colorizer.angle_scanner.service import AngleScannerService


def test_scan_collapses_duplicates():
    """Test that many clips of one angle give one entry."""
    scanner = AngleScannerService()
    angles = scanner.scan(["Angle 2", "Cam 2", "A2 pickup", "b-roll", None, ""])
    assert angles == {2}


def test_sorted_angles_ascending():
    """Test ascending order of discovered angles."""
    scanner = AngleScannerService()
    assert scanner.sorted_angles(["Cam 10", "Angle 3", "Video 1"]) == [1, 3, 10]


def test_scan_timeline_reads_video_and_audio(multicam_provider):
    """Test scanning every track of both types."""
    scanner = AngleScannerService()
    assert scanner.scan_timeline(multicam_provider) == {1, 2, 3}
    assert scanner.sorted_timeline_angles(multicam_provider) == [1, 2, 3]


def test_angle_options_for_found_angles():
    """Test selector labels for discovered angles."""
    scanner = AngleScannerService()
    assert scanner.angle_options([4, 2, 4]) == ["Angle 2", "Angle 4"]


def test_angle_options_default_range():
    """Test the 1..10 fallback when nothing was found."""
    scanner = AngleScannerService()
    options = scanner.angle_options([])
    assert options[0] == "Angle 1"
    assert options[-1] == "Angle 10"
    assert len(options) == 10

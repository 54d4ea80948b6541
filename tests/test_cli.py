"""Tests for the command line entry point."""

import argparse

import opentimelineio as otio
import pytest

from multicam_colorizer.cli import main, parse_selection
from multicam_colorizer.schemas import AngleColorSelection, ClipColor, TrackType
from multicam_colorizer.timeline.otio_provider import OTIOTimelineProvider


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MULTICAM_COLORIZER_MODE", raising=False)
    monkeypatch.delenv("MULTICAM_COLORIZER_DEBUG", raising=False)
    monkeypatch.delenv("MULTICAM_COLORIZER_LOG_LEVEL", raising=False)


@pytest.fixture
def otio_file(otio_timeline, tmp_path):
    path = tmp_path / "edit.otio"
    otio.adapters.write_to_file(otio_timeline, str(path))
    return path


def test_parse_selection():
    """Test parsing of --set rows."""
    assert parse_selection("Angle 1 = Blue") == AngleColorSelection(
        angle_label="Angle 1", color_name="Blue"
    )
    assert parse_selection("Bypass=") == AngleColorSelection(
        angle_label="Bypass", color_name=""
    )
    with pytest.raises(argparse.ArgumentTypeError):
        parse_selection("Angle 1 Blue")


def test_dry_run_prints_report(otio_file, capsys):
    """Test that a dry run prints the mapping and leaves the file untouched."""
    before = otio_file.read_text()

    assert main([str(otio_file), "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "Angle 1 -> Orange" in out
    assert "2 angles mapped using 2 unique colors." in out
    assert otio_file.read_text() == before


def test_manual_rows_written_to_output(otio_file, tmp_path, capsys):
    """Test manual mode with --set rows and a separate output file."""
    output = tmp_path / "colored.otio"

    exit_code = main(
        [
            str(otio_file),
            "--mode",
            "Manual",
            "--set",
            "Angle 2=Chocolate",
            "--output",
            str(output),
        ]
    )

    assert exit_code == 0
    assert "Colored 2 clips" in capsys.readouterr().out
    provider = OTIOTimelineProvider.from_file(output)
    colors = [clip.color for clip in provider.clips_in_track(TrackType.VIDEO, 1)]
    assert colors == [None, ClipColor.CHOCOLATE, None]


def test_missing_timeline_exit_code(tmp_path):
    """Test that a missing timeline aborts with exit code 1."""
    assert main([str(tmp_path / "missing.otio")]) == 1


@pytest.mark.parametrize(
    "row",
    ["Angle 2=chocolate", "Angle 2=Magenta", "angle 2=Teal", "Cam 2=Teal", "Angle 0=Teal"],
)
def test_parse_selection_rejects_invalid_rows(row):
    """Test that misspelled angles and colors are refused."""
    with pytest.raises(argparse.ArgumentTypeError):
        parse_selection(row)


def test_invalid_color_row_exits_with_usage_error(otio_file, capsys):
    """Test that a case-mismatched color stops the run before coloring."""
    before = otio_file.read_text()

    with pytest.raises(SystemExit) as excinfo:
        main([str(otio_file), "--mode", "manual", "--set", "Angle 2=chocolate"])

    assert excinfo.value.code == 2
    assert "invalid color 'chocolate'" in capsys.readouterr().err
    assert otio_file.read_text() == before


def test_invalid_mode_in_environment_exit_code(otio_file, monkeypatch):
    """Test that a bad configured mode is reported instead of raised."""
    monkeypatch.setenv("MULTICAM_COLORIZER_MODE", "auto")
    assert main([str(otio_file)]) == 1

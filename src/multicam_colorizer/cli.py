"""Command line entry point for colorizing a multicam timeline."""

import argparse
import logging
import sys
from pathlib import Path

from multicam_colorizer.angle_detector import parse_angle_label
from multicam_colorizer.colorizer.providers import colorizer_service
from multicam_colorizer.config import get_colorizer_config
from multicam_colorizer.logging_config import configure_logging
from multicam_colorizer.schemas import (
    BYPASS,
    PALETTE,
    AllocationMode,
    AngleColorSelection,
    parse_clip_color,
)
from multicam_colorizer.timeline import TimelineProvider, TimelineUnavailableError
from multicam_colorizer.timeline.otio_provider import OTIOTimelineProvider
from multicam_colorizer.timeline.resolve_provider import ResolveTimelineProvider

logger = logging.getLogger(__name__)


def parse_selection(text: str) -> AngleColorSelection:
    """Parse an "Angle 1=Blue" row into a selection.

    "Bypass" as the angle and an empty color are accepted; both exclude the row.

    Raises:
        argparse.ArgumentTypeError: If the row has no "=", the angle is not an
            "Angle N" label, or the color is not a palette color name.
    """
    angle_label, sep, color_name = text.rpartition("=")
    if not sep:
        msg = f"expected 'Angle N=Color', got {text!r}"
        raise argparse.ArgumentTypeError(msg)

    angle_label = angle_label.strip()
    color_name = color_name.strip()
    if angle_label != BYPASS and parse_angle_label(angle_label) is None:
        msg = f"invalid angle {angle_label!r}: expected 'Angle N' (N >= 1) or '{BYPASS}'"
        raise argparse.ArgumentTypeError(msg)
    if color_name and parse_clip_color(color_name) is None:
        choices = ", ".join(PALETTE)
        msg = f"invalid color {color_name!r}: choose from {choices}"
        raise argparse.ArgumentTypeError(msg)

    return AngleColorSelection(angle_label=angle_label, color_name=color_name)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="multicam-colorizer",
        description="Colorize multicam timeline clips by the angle detected in their names",
    )
    parser.add_argument(
        "otio_file",
        nargs="?",
        type=Path,
        default=None,
        help="OTIO timeline to colorize (default: active DaVinci Resolve timeline)",
    )
    parser.add_argument(
        "--mode",
        type=AllocationMode,
        choices=list(AllocationMode),
        default=None,
        help="Allocation mode (default: env MULTICAM_COLORIZER_MODE or automatic)",
    )
    parser.add_argument(
        "--set",
        dest="selections",
        type=parse_selection,
        action="append",
        default=None,
        metavar="'Angle N=Color'",
        help="Angle color row for manual/individual mode; repeat for more rows",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the colored OTIO timeline (default: overwrite input)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the angle to color mapping without coloring any clip",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _open_timeline(otio_file: Path | None) -> TimelineProvider:
    if otio_file is not None:
        return OTIOTimelineProvider.from_file(otio_file)
    return ResolveTimelineProvider.from_current_timeline()


def main(argv: list[str] | None = None) -> int:
    """Run the colorizer and return a process exit code."""
    args = parse_args(argv)
    try:
        config = get_colorizer_config()
    except ValueError as exc:
        configure_logging()
        logger.error("%s", exc)
        return 1

    configure_logging("DEBUG" if args.debug else config.effective_log_level)

    mode = args.mode or config.mode
    service = colorizer_service()

    try:
        provider = _open_timeline(args.otio_file)
    except TimelineUnavailableError as exc:
        logger.error("%s", exc)
        return 1

    if args.dry_run:
        report = service.preview(provider, mode, args.selections)
        print(report.text)
        return 0

    result = service.colorize(provider, mode, args.selections)
    print(result.status_message)

    if isinstance(provider, OTIOTimelineProvider):
        provider.save(args.output or args.otio_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""sig-bitmap - Interpret signal bitmaps for a process."""

import argparse
import logging
import os
import sys
import textwrap
from pathlib import Path

from sigbitmap.models import BitmapCategory, SignalReport
from sigbitmap.procfs import read_bitmap
from sigbitmap.signals import decode_bitmap

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

MAX_COLUMN = 80
NAME_COLUMN = 45  # Where the signal names start on the first line
MAX_PID = 0xFFFFFFFF

PROCFS_ENV = "SIG_BITMAP_PROCFS"


def build_report(
    pid: int,
    category: BitmapCategory,
    procfs_root: str | Path | None = None,
) -> SignalReport:
    """Read and decode one bitmap of a process."""
    bitmap = read_bitmap(pid, category, procfs_root)
    names, _ = decode_bitmap(bitmap)
    return SignalReport(pid=pid, category=category, bitmap=bitmap, names=tuple(names))


def format_report(report: SignalReport, width: int = MAX_COLUMN) -> str:
    """
    Render a report as one line wrapped to width columns.

    Continuation lines are indented so the signal names line up under the
    first name. Signal names are never split.
    """
    names = ", ".join(report.names) if report.names else "NONE"
    line = (
        f"PID: {report.pid:<6} {report.category.label} {report.count:<2} "
        f"[0x{report.bitmap:016x}]: {names}"
    )
    return textwrap.fill(
        line,
        width=width,
        subsequent_indent=" " * NAME_COLUMN,
        break_long_words=False,
        break_on_hyphens=False,
    )


def _pid(text: str) -> int:
    try:
        pid = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pid: {text!r}") from None
    if not 0 <= pid <= MAX_PID:
        raise argparse.ArgumentTypeError(f"pid out of range: {text}")
    return pid


def _category(text: str) -> BitmapCategory:
    try:
        return BitmapCategory.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_parser() -> argparse.ArgumentParser:
    categories = ", ".join(f"{c.value} ({c.description})" for c in BitmapCategory)
    parser = argparse.ArgumentParser(
        prog="sig-bitmap",
        description="Interpret signal bit-maps for a process.",
    )
    parser.add_argument(
        "-p",
        "--pid",
        dest="pid",
        type=_pid,
        required=True,
        help="PID of the process",
    )
    parser.add_argument(
        "-m",
        "--map",
        dest="category",
        type=_category,
        default=BitmapCategory.SIG_PND,
        metavar="MAP",
        help=f"type of bit-map to interpret: {categories} (default: SigPnd)",
    )
    parser.add_argument(
        "--procfs",
        dest="procfs_root",
        default=os.environ.get(PROCFS_ENV),
        help=f"procfs mount point (default: ${PROCFS_ENV} or /proc)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log diagnostics to stderr",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for sig-bitmap."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    report = build_report(args.pid, args.category, args.procfs_root)
    logger.debug(
        "pid %d %s bitmap 0x%016x, %d signals",
        report.pid,
        report.category.value,
        report.bitmap,
        report.count,
    )
    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())

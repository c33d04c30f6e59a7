"""Reading signal bitmaps from /proc/<pid>/status."""

import logging
import re
from pathlib import Path

import psutil

from sigbitmap.models import BitmapCategory

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_MAX_BITMAP = (1 << 64) - 1


def status_path(pid: int, procfs_root: str | Path | None = None) -> Path:
    """
    Path of the status file for a process under the procfs mount.

    Without procfs_root the mount point is psutil.PROCFS_PATH, so setting
    that attribute redirects both psutil and this module to an alternative
    procfs (e.g. a host /proc bind-mounted into a container).
    """
    root = Path(procfs_root if procfs_root is not None else psutil.PROCFS_PATH)
    return root / str(pid) / "status"


def parse_bitmap(text: str) -> int:
    """
    Parse the hexadecimal value of a status line.

    Raises:
        ValueError: if text is not plain hex digits or exceeds 64 bits.
    """
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"not a hexadecimal bitmap: {text!r}")
    value = int(text, 16)
    if value > _MAX_BITMAP:
        raise ValueError(f"bitmap wider than 64 bits: {text!r}")
    return value


def read_bitmap(
    pid: int,
    category: BitmapCategory,
    procfs_root: str | Path | None = None,
) -> int:
    """
    Read one signal bitmap of a process.

    The first line starting with the category label whose value parses is
    used. Malformed values are skipped. Returns 0 if the status file cannot
    be read or holds no usable line for the category.
    """
    path = status_path(pid, procfs_root)
    prefix = category.label

    try:
        with open(path, encoding="utf-8", errors="replace") as status:
            for line in status:
                if not line.startswith(prefix):
                    continue
                value = line[len(prefix):].strip()
                try:
                    return parse_bitmap(value)
                except ValueError as exc:
                    logger.warning("%s: skipping malformed %s line: %s", path, category.value, exc)
    except OSError as exc:
        # Process gone or not accessible
        logger.debug("cannot read %s: %s", path, exc)
        return 0

    logger.debug("%s: no %s line found", path, category.value)
    return 0

"""Shared fixtures for sig-bitmap tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_status():
    """Return a helper that writes a fake /proc/<pid>/status under a root."""

    def _write_status(root: Path, pid: int, text: str) -> Path:
        path = root / str(pid) / "status"
        path.parent.mkdir(parents=True)
        path.write_text(text)
        return path

    return _write_status

"""Data models for sig-bitmap."""

from dataclasses import dataclass
from enum import Enum


class BitmapCategory(Enum):
    """Signal bitmaps exposed in /proc/<pid>/status."""

    SIG_PND = "SigPnd"
    SHD_PND = "ShdPnd"
    SIG_BLK = "SigBlk"
    SIG_IGN = "SigIgn"
    SIG_CGT = "SigCgt"

    @property
    def label(self) -> str:
        """Line prefix in the status file, also used on the display line."""
        return f"{self.value}:"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, text: str) -> "BitmapCategory":
        """
        Look up a category by its short name.

        Matching ignores case and dashes, so "SigPnd", "sigpnd" and "sig-pnd"
        all resolve to SIG_PND.
        """
        key = text.strip().replace("-", "").lower()
        for category in cls:
            if category.value.lower() == key:
                return category
        raise ValueError(f"unknown bitmap category: {text!r}")

    def __str__(self) -> str:
        return self.label


_DESCRIPTIONS = {
    BitmapCategory.SIG_PND: "pending for the thread",
    BitmapCategory.SHD_PND: "pending for the whole process",
    BitmapCategory.SIG_BLK: "blocked",
    BitmapCategory.SIG_IGN: "ignored",
    BitmapCategory.SIG_CGT: "caught",
}


@dataclass(slots=True, frozen=True)
class SignalReport:
    """Immutable result of decoding one bitmap of one process."""

    pid: int
    category: BitmapCategory
    bitmap: int  # Raw 64-bit value, 0 if unavailable
    names: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.names)

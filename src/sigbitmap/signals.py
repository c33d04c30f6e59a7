"""Signal numbering and bitmap decoding."""

from collections.abc import Iterator

NR_SIGNALS = 64

SIGRTMIN = 0x22
SIGRTMAX = 0x40

INVALID_NAME = "INVL"

# Indexed by signal number - 1
SIGNAL_NAMES = (
    "HUP", "INT", "QUIT", "ILL", "TRAP", "ABRT", "BUS", "FPE",
    "KILL", "USR1", "SEGV", "USR2", "PIPE", "ALRM", "TERM", "STKFLT",
    "CHLD", "CONT", "STOP", "TSTP", "TTIN", "TTOU", "URG", "XCPU",
    "XFSZ", "VTALRM", "PROF", "WINCH", "POLL", "IO", "PWR", "SYS",
)

POSIX_RANGE = range(0x01, 0x20)
RTMIN_RANGE = range(0x20, 0x32)
RTMAX_RANGE = range(0x32, 0x41)


def _relative_name(index: int, base: int, name: str) -> str:
    diff = index - base
    if diff == 0:
        return name
    return f"{name}{diff:+d}"


def signal_name(index: int) -> str:
    """
    Return the short name of a 1-based signal number.

    Standard signals come from SIGNAL_NAMES. Real-time signals are named
    relative to SIGRTMIN or SIGRTMAX, whichever half of the range they fall
    in (e.g. "RTMIN+2", "RTMAX-2"). Anything outside 1..64 is "INVL".
    """
    if index in POSIX_RANGE:
        return SIGNAL_NAMES[index - 1]
    if index in RTMIN_RANGE:
        return _relative_name(index, SIGRTMIN, "RTMIN")
    if index in RTMAX_RANGE:
        return _relative_name(index, SIGRTMAX, "RTMAX")
    return INVALID_NAME


def iter_signal_indexes(bitmap: int) -> Iterator[int]:
    """Yield the signal numbers whose bit is set, in ascending order."""
    for index in range(1, NR_SIGNALS):
        if bitmap & (1 << (index - 1)):
            yield index


def decode_bitmap(bitmap: int) -> tuple[list[str], int]:
    """Translate a signal bitmap into its signal names and their count."""
    names = [signal_name(index) for index in iter_signal_indexes(bitmap)]
    return names, len(names)

# src/colordir/utils/size.py
from decimal import Decimal, ROUND_HALF_UP
from string import ascii_uppercase

BASE_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

_STEP = 1024
_CENTS = Decimal("0.01")


def unit_name(index: int) -> str:
    """Unit for the given number of 1024 divisions (1 -> KB)."""
    if index <= len(BASE_UNITS):
        return BASE_UNITS[index - 1]
    # Past YB: AB, BB, ..., ZB, AAB, ...
    overflow = index - len(BASE_UNITS) - 1
    letters = ""
    while True:
        overflow, rest = divmod(overflow, len(ascii_uppercase))
        letters = ascii_uppercase[rest] + letters
        if overflow == 0:
            break
        overflow -= 1
    return letters + "B"


def format_size(size: int) -> str:
    """
    Human readable byte count: '512 B', '1.00 KB', '1.50 KB', ...
    Values are rounded half-up to two decimals; a value that rounds up to
    1024.00 moves to the next unit.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size < _STEP:
        return f"{size} B"

    # Exact arithmetic keeps 1024 -> 1.00 KB free of float drift.
    reduced = Decimal(size)
    index = 0
    while reduced >= _STEP:
        reduced /= _STEP
        index += 1

    rounded = reduced.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded >= _STEP:
        rounded = (rounded / _STEP).quantize(_CENTS, rounding=ROUND_HALF_UP)
        index += 1
    return f"{rounded} {unit_name(index)}"

"""Utility helpers for chunk scanning and numeric parsing."""
from __future__ import annotations

from typing import Optional

from .core.models import Chunk

INT32_MAX = 2_147_483_647
_INT32_MAX_DIGITS = len(str(INT32_MAX))
_BMP_MAX = "\uffff"


def is_digit(char: str) -> bool:
    """Unicode decimal digit test (category ``Nd``), limited to the BMP.

    Supplementary-plane digits such as MATHEMATICAL BOLD DIGIT ONE count as
    ordinary text, matching comparers that classify UTF-16 code units.
    """
    return char <= _BMP_MAX and char.isdecimal()


def scan_chunk(text: str, start: int, stop: int) -> Chunk:
    """Return the maximal digit or non-digit run of ``text[start:stop]`` beginning at ``start``."""
    is_digits = is_digit(text[start])
    end = start + 1
    while end < stop and is_digit(text[end]) == is_digits:
        end += 1
    return Chunk(start=start, length=end - start, is_digits=is_digits)


def parse_int32(text: str, start: int, stop: int) -> Optional[int]:
    """Parse ``text[start:stop]`` as a non-negative 32-bit integer.

    Only ASCII digits are accepted. Returns ``None`` when the run contains
    anything else or when its value does not fit, so callers can fall back to
    text comparison.
    """
    if start >= stop:
        return None
    # leading zeros do not count towards the digit limit
    while start < stop - 1 and text[start] == "0":
        start += 1
    if stop - start > _INT32_MAX_DIGITS:
        return None
    digits = text[start:stop]
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > INT32_MAX:
        return None
    return value

"""Alphanumeric ("natural") string comparison."""
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, ClassVar, Optional

from ..utils import parse_int32, scan_chunk
from .collation import text_comparison_for
from .models import StringComparison, TextSpan


class AlphanumericComparer:
    """Compares strings by grouping digit and non-digit runs.

    Digit runs are compared by numeric value and everything else with the
    configured :class:`StringComparison`, so ``"1" < "10" < "100"`` and
    ``"ABC8" < "ABC13" < "ABC147"``.

    Digit runs larger than a signed 32-bit integer are compared as text,
    which orders them lexicographically rather than numerically.

    Only BMP characters are classified as digits. Ordinal modes order by code
    point, so supplementary-plane characters sort after U+E000..U+FFFF, where
    a UTF-16 code unit comparison would place them before.

    Instances hold nothing but their mode and may be shared between threads.
    """

    __slots__ = ("_mode", "_compare_text")

    default: ClassVar[AlphanumericComparer]

    def __init__(self, mode: StringComparison = StringComparison.CURRENT_CULTURE) -> None:
        if not isinstance(mode, StringComparison):
            raise TypeError(f"mode must be a StringComparison, not {type(mode).__name__}")
        self._mode = mode
        self._compare_text = text_comparison_for(mode)

    @property
    def mode(self) -> StringComparison:
        return self._mode

    @property
    def sort_key(self) -> Callable[[Optional[str]], Any]:
        """Key function for :func:`sorted`, :meth:`list.sort`, :func:`min` and friends."""
        return cmp_to_key(self.compare)

    def __call__(self, left: Optional[str], right: Optional[str]) -> int:
        return self.compare(left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mode})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphanumericComparer):
            return NotImplemented
        return self._mode is other._mode

    def __hash__(self) -> int:
        return hash((AlphanumericComparer, self._mode))

    def compare(self, left: Optional[str], right: Optional[str]) -> int:
        """Return -1, 0 or 1. ``None`` compares as the empty string."""
        return self.compare_spans(TextSpan.of(left), TextSpan.of(right))

    def compare_spans(self, left: TextSpan | str, right: TextSpan | str) -> int:
        left = TextSpan.of(left)
        right = TextSpan.of(right)
        left_text, l, left_stop = left.text, left.start, left.stop
        right_text, r, right_stop = right.text, right.start, right.stop

        while l < left_stop or r < right_stop:
            if l >= left_stop:
                return -1
            if r >= right_stop:
                return 1

            left_chunk = scan_chunk(left_text, l, left_stop)
            right_chunk = scan_chunk(right_text, r, right_stop)
            l = left_chunk.stop
            r = right_chunk.stop

            result = 0
            numeric = False
            if left_chunk.is_digits and right_chunk.is_digits:
                left_value = parse_int32(left_text, left_chunk.start, left_chunk.stop)
                right_value = (
                    parse_int32(right_text, right_chunk.start, right_chunk.stop)
                    if left_value is not None
                    else None
                )
                if left_value is not None and right_value is not None:
                    numeric = True
                    result = (left_value > right_value) - (left_value < right_value)
            if not numeric:
                result = self._compare_text(
                    left_text[left_chunk.start : left_chunk.stop],
                    right_text[right_chunk.start : right_chunk.stop],
                )

            if result != 0:
                return result

        return 0


AlphanumericComparer.default = AlphanumericComparer()
default_comparer = AlphanumericComparer.default

__all__ = ["AlphanumericComparer", "default_comparer"]

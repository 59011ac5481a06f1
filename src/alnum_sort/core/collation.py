"""Text comparison of non-digit chunks for each :class:`StringComparison` mode."""
from __future__ import annotations

import locale
import unicodedata
from typing import Callable

from .models import StringComparison

TextComparison = Callable[[str, str], int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


def compare_ordinal(left: str, right: str) -> int:
    return _cmp(left, right)


def _simple_upper(char: str) -> str:
    upper = char.upper()
    # full mappings such as "ß" -> "SS" keep the original character
    return upper if len(upper) == 1 else char


def _upper_invariant(value: str) -> str:
    return "".join(_simple_upper(char) for char in value)


def compare_ordinal_ignore_case(left: str, right: str) -> int:
    return _cmp(_upper_invariant(left), _upper_invariant(right))


def _strcoll(left: str, right: str) -> int:
    """``locale.strcoll`` that accepts embedded NUL characters.

    NUL-separated pieces are collated one by one, then fewer pieces order first.
    """
    if "\x00" not in left and "\x00" not in right:
        return _sign(locale.strcoll(left, right))
    left_pieces = left.split("\x00")
    right_pieces = right.split("\x00")
    for left_piece, right_piece in zip(left_pieces, right_pieces):
        result = _sign(locale.strcoll(left_piece, right_piece))
        if result != 0:
            return result
    return _cmp(len(left_pieces), len(right_pieces))


def compare_current_culture(left: str, right: str) -> int:
    return _strcoll(left, right)


def compare_current_culture_ignore_case(left: str, right: str) -> int:
    return _strcoll(left.casefold(), right.casefold())


def _base_letters(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def invariant_key(value: str, *, ignore_case: bool = False) -> tuple[str, ...]:
    """Locale-independent collation key.

    Levels: base letters (accents stripped, case folded), then accents,
    then case with lowercase ordered before uppercase.
    """
    primary = _base_letters(value)
    secondary = unicodedata.normalize("NFKD", value).casefold()
    if ignore_case:
        return (primary, secondary)
    return (primary, secondary, value.swapcase())


def _invariant_comparison(mode: StringComparison) -> TextComparison:
    ignore_case = mode.ignore_case

    def compare(left: str, right: str) -> int:
        return _cmp(
            invariant_key(left, ignore_case=ignore_case),
            invariant_key(right, ignore_case=ignore_case),
        )

    compare.__name__ = f"compare_{mode.name.lower()}"
    return compare


compare_invariant_culture = _invariant_comparison(StringComparison.INVARIANT_CULTURE)
compare_invariant_culture_ignore_case = _invariant_comparison(
    StringComparison.INVARIANT_CULTURE_IGNORE_CASE
)


_COMPARISONS: dict[StringComparison, TextComparison] = {
    StringComparison.ORDINAL: compare_ordinal,
    StringComparison.ORDINAL_IGNORE_CASE: compare_ordinal_ignore_case,
    StringComparison.CURRENT_CULTURE: compare_current_culture,
    StringComparison.CURRENT_CULTURE_IGNORE_CASE: compare_current_culture_ignore_case,
    StringComparison.INVARIANT_CULTURE: compare_invariant_culture,
    StringComparison.INVARIANT_CULTURE_IGNORE_CASE: compare_invariant_culture_ignore_case,
}


def text_comparison_for(mode: StringComparison) -> TextComparison:
    return _COMPARISONS[mode]


__all__ = [
    "TextComparison",
    "compare_current_culture",
    "compare_current_culture_ignore_case",
    "compare_invariant_culture",
    "compare_invariant_culture_ignore_case",
    "compare_ordinal",
    "compare_ordinal_ignore_case",
    "invariant_key",
    "text_comparison_for",
]

"""Sorting helpers built on :class:`AlphanumericComparer`."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Iterable, Optional, TypeVar

from .core.comparer import AlphanumericComparer, default_comparer

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _key_for(
    comparer: Optional[AlphanumericComparer],
    key: Optional[Callable[[T], Optional[str]]],
):
    sort_key = (comparer or default_comparer).sort_key
    if key is None:
        return sort_key
    return lambda item: sort_key(key(item))


def natural_sort(
    items: list[T],
    *,
    comparer: Optional[AlphanumericComparer] = None,
    key: Optional[Callable[[T], Optional[str]]] = None,
    reverse: bool = False,
) -> None:
    """Sort ``items`` in place. Ordered-equal entries keep their input order."""
    start = perf_counter()
    items.sort(key=_key_for(comparer, key), reverse=reverse)
    logger.debug("Sorted %s items in %.4fs", len(items), perf_counter() - start)


def natural_sorted(
    iterable: Iterable[T],
    *,
    comparer: Optional[AlphanumericComparer] = None,
    key: Optional[Callable[[T], Optional[str]]] = None,
    reverse: bool = False,
) -> list[T]:
    items = list(iterable)
    natural_sort(items, comparer=comparer, key=key, reverse=reverse)
    return items


def unique_sorted(
    iterable: Iterable[Optional[str]],
    *,
    comparer: Optional[AlphanumericComparer] = None,
    reverse: bool = False,
) -> list[Optional[str]]:
    """Sort and drop entries that compare equal to their predecessor."""
    comparer = comparer or default_comparer
    ordered = natural_sorted(iterable, comparer=comparer, reverse=reverse)
    result: list[Optional[str]] = []
    for value in ordered:
        if result and comparer.compare(result[-1], value) == 0:
            continue
        result.append(value)
    if len(result) != len(ordered):
        logger.debug("Dropped %s ordered-equal duplicates", len(ordered) - len(result))
    return result


__all__ = ["natural_sort", "natural_sorted", "unique_sorted"]

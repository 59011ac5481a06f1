import pytest

from alnum_sort import natural_sort, natural_sorted, unique_sorted
from alnum_sort.config import SortConfig
from alnum_sort.core.comparer import AlphanumericComparer
from alnum_sort.core.models import StringComparison

ORDINAL = AlphanumericComparer(StringComparison.ORDINAL)


def test_natural_sorted_orders_items():
    assert natural_sorted({"item10", "item2", "item1", "item"}) == ["item", "item1", "item2", "item10"]


def test_natural_sorted_handles_versions_and_padding():
    values = ["v1.10", "v1.9", "v1.09a", "v10.0", "v2.0"]
    assert natural_sorted(values, comparer=ORDINAL) == ["v1.9", "v1.09a", "v1.10", "v2.0", "v10.0"]


def test_natural_sort_is_in_place_and_reversible():
    values = ["file3", "file20", "file100"]
    assert natural_sort(values, comparer=ORDINAL, reverse=True) is None
    assert values == ["file100", "file20", "file3"]


def test_natural_sorted_is_stable_for_ordered_equal_values():
    values = ["a07", "a7", "a007", None, ""]
    assert natural_sorted(values, comparer=ORDINAL) == [None, "", "a07", "a7", "a007"]


def test_natural_sorted_with_key():
    rows = [{"name": "Disk 10"}, {"name": "Disk 9"}, {"name": None}]
    ordered = natural_sorted(rows, comparer=ORDINAL, key=lambda row: row["name"])
    assert [row["name"] for row in ordered] == [None, "Disk 9", "Disk 10"]


def test_unique_sorted_keeps_first_of_equal_values():
    values = ["a8", "a07", "a7", "A7"]
    assert unique_sorted(values, comparer=ORDINAL) == ["A7", "a07", "a8"]
    ignore_case = AlphanumericComparer(StringComparison.ORDINAL_IGNORE_CASE)
    assert unique_sorted(values, comparer=ignore_case) == ["a07", "a8"]


def test_sorting_logs_at_debug(caplog: pytest.LogCaptureFixture):
    with caplog.at_level("DEBUG", logger="alnum_sort.sorting"):
        natural_sorted(["b", "a"], comparer=ORDINAL)
    assert any("Sorted 2 items" in record.getMessage() for record in caplog.records)


def test_config_builds_comparer():
    assert SortConfig().comparer() is AlphanumericComparer.default
    assert SortConfig(mode=StringComparison.ORDINAL).comparer() == ORDINAL

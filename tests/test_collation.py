import pytest

from alnum_sort.core import collation
from alnum_sort.core.models import StringComparison


def test_every_mode_has_a_text_comparison():
    for mode in StringComparison:
        compare = collation.text_comparison_for(mode)
        assert compare("same", "same") == 0


def test_ordinal_uses_code_points():
    assert collation.compare_ordinal("B", "a") == -1
    assert collation.compare_ordinal("a", "B") == 1
    assert collation.compare_ordinal_ignore_case("a", "B") == -1
    assert collation.compare_ordinal_ignore_case("straße", "STRASSE") != 0
    assert collation.compare_ordinal_ignore_case("Straße", "STRAẞE") != 0
    assert collation.compare_ordinal_ignore_case("ǆ", "Ǆ") == 0


def test_invariant_orders_letters_before_case():
    assert collation.compare_invariant_culture("a", "B") == -1
    assert collation.compare_invariant_culture("B", "a") == 1
    assert collation.compare_invariant_culture("a", "A") == -1


def test_invariant_accents_rank_below_base_letters():
    assert collation.compare_invariant_culture("resume", "résumé") == -1
    assert collation.compare_invariant_culture("résumé", "resumf") == -1
    assert collation.compare_invariant_culture_ignore_case("Résumé", "résumé") == 0
    assert collation.compare_invariant_culture_ignore_case("resume", "résumé") == -1


def test_invariant_key_levels():
    assert collation.invariant_key("\u00c9a") == ("ea", "e\u0301a", "\u00e9A")
    assert collation.invariant_key("\u00c9a", ignore_case=True) == ("ea", "e\u0301a")


def test_current_culture_normalises_strcoll_result(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(collation.locale, "strcoll", lambda left, right: 17)
    assert collation.compare_current_culture("x", "y") == 1


def test_current_culture_ignore_case_folds_before_collating(monkeypatch: pytest.MonkeyPatch):
    seen = []

    def fake_strcoll(left: str, right: str) -> int:
        seen.append((left, right))
        return 0

    monkeypatch.setattr(collation.locale, "strcoll", fake_strcoll)
    assert collation.compare_current_culture_ignore_case("ABC", "Straße") == 0
    assert seen == [("abc", "strasse")]

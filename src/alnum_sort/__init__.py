"""Natural ordering of strings: digit runs compare by value, the rest as text."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .core.models import Chunk, StringComparison, TextSpan

__all__ = [
    "AlphanumericComparer",
    "Chunk",
    "SortConfig",
    "StringComparison",
    "TextSpan",
    "default_comparer",
    "natural_sort",
    "natural_sorted",
    "unique_sorted",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"AlphanumericComparer", "default_comparer"}:
        module = import_module(".core.comparer", __name__)
        return getattr(module, name)
    if name in {"natural_sort", "natural_sorted", "unique_sorted"}:
        module = import_module(".sorting", __name__)
        return getattr(module, name)
    if name == "SortConfig":
        module = import_module(".config", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

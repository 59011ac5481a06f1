"""Pure building blocks for alphanumeric comparison."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AlphanumericComparer",
    "default_comparer",
    "Chunk",
    "StringComparison",
    "TextSpan",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"AlphanumericComparer", "default_comparer"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name in {"Chunk", "StringComparison", "TextSpan"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

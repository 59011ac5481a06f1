"""Configuration dataclasses for alphanumeric sorting."""
from __future__ import annotations

from dataclasses import dataclass

from .core.comparer import AlphanumericComparer
from .core.models import StringComparison

DEFAULT_USER_AGENT = "alnum-sort/1.0"


@dataclass(slots=True)
class SortConfig:
    mode: StringComparison = StringComparison.CURRENT_CULTURE
    reverse: bool = False
    unique: bool = False
    strip: bool = True
    skip_blank: bool = False
    encoding: str = "utf-8"
    timeout: float = 10.0  # seconds, remote sources only
    user_agent: str = DEFAULT_USER_AGENT

    def comparer(self) -> AlphanumericComparer:
        if self.mode is AlphanumericComparer.default.mode:
            return AlphanumericComparer.default
        return AlphanumericComparer(self.mode)

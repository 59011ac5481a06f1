"""Core value types used by the alphanumeric comparer."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")


class StringComparison(Enum):
    """Text comparison semantics applied to non-digit chunks."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal-ignore-case"
    CURRENT_CULTURE = "current-culture"
    CURRENT_CULTURE_IGNORE_CASE = "current-culture-ignore-case"
    INVARIANT_CULTURE = "invariant-culture"
    INVARIANT_CULTURE_IGNORE_CASE = "invariant-culture-ignore-case"

    @property
    def ignore_case(self) -> bool:
        return self.value.endswith("-ignore-case")

    @classmethod
    def parse(cls, name: str | StringComparison) -> StringComparison:
        """Resolve ``ordinal-ignore-case``, ``ORDINAL_IGNORE_CASE`` or ``OrdinalIgnoreCase``."""
        if isinstance(name, cls):
            return name
        normalized = _CAMEL_BOUNDARY_RE.sub("-", name.strip())
        normalized = normalized.replace("_", "-").replace(" ", "-").lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown string comparison mode: {name!r}")


@dataclass(frozen=True, slots=True)
class Chunk:
    start: int
    length: int
    is_digits: bool

    @property
    def stop(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Read-only window ``text[start:stop]`` that is scanned without copying."""

    text: str
    start: int = 0
    stop: Optional[int] = None

    def __post_init__(self) -> None:
        size = len(self.text)
        stop = size if self.stop is None else self.stop
        if not 0 <= self.start <= stop <= size:
            raise ValueError(
                f"Span bounds [{self.start}:{self.stop}] out of range for text of length {size}"
            )
        object.__setattr__(self, "stop", stop)

    @classmethod
    def of(cls, value: str | TextSpan | None) -> TextSpan:
        if isinstance(value, TextSpan):
            return value
        return cls(value or "")

    def __len__(self) -> int:
        return self.stop - self.start

    def __str__(self) -> str:
        return self.text[self.start : self.stop]


__all__ = ["Chunk", "StringComparison", "TextSpan"]

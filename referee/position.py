"""Source locations and spans."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Location:
    """A row/column point in a source text."""

    row: int = 0
    col: int = 0

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"


@dataclass(frozen=True)
class Position:
    """A span between two locations."""

    beg: Location = field(default_factory=Location)
    end: Location = field(default_factory=Location)

    def __str__(self) -> str:
        return f"{self.beg} .. {self.end}"
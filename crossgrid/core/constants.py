"""Shared constants and enumerations for grid construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CellType(str, Enum):
    """All supported cell types in the grid."""

    BLOCKED = "BLOCKED"
    EMPTY = "EMPTY"
    LETTER = "LETTER"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Resolve ``across``/``down`` in any case, raising ``ValueError`` otherwise."""

        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Expected across or down, got {text}") from None

    @property
    def label(self) -> str:
        return self.value.lower()

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

BLOCK_GLYPH = "▩"
EMPTY_GLYPH = "▢"

MIN_GRID_SIZE = 3
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 30
# Classic ceiling on the share of blocked squares, in percent.
DEFAULT_BLOCK_PERCENT = 16


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

"""Data models supporting grid construction."""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_letters
from typing import List, Optional, Tuple

from .constants import BLOCK_GLYPH, EMPTY_GLYPH, CellType, Direction


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell: blocked, empty or holding one uppercase letter."""

    type: CellType = CellType.EMPTY
    letter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type == CellType.LETTER:
            if not self.letter or len(self.letter) != 1 or self.letter not in ascii_letters:
                raise ValueError(f"Invalid letter {self.letter!r}")
            object.__setattr__(self, "letter", self.letter.upper())
        elif self.letter is not None:
            raise ValueError(f"{self.type.value} cells cannot hold a letter")

    @classmethod
    def blocked(cls) -> "Cell":
        return cls(CellType.BLOCKED)

    @classmethod
    def empty(cls) -> "Cell":
        return cls(CellType.EMPTY)

    @classmethod
    def of_letter(cls, letter: str) -> "Cell":
        return cls(CellType.LETTER, letter)

    def is_blocked(self) -> bool:
        return self.type == CellType.BLOCKED

    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY

    @property
    def glyph(self) -> str:
        if self.type == CellType.BLOCKED:
            return BLOCK_GLYPH
        if self.type == CellType.EMPTY:
            return EMPTY_GLYPH
        return self.letter or "?"


@dataclass(frozen=True)
class Run:
    """A maximal stretch of non-blocked cells along one row or column."""

    start_row: int
    start_col: int
    direction: Direction
    length: int

    @property
    def start(self) -> Tuple[int, int]:
        return self.start_row, self.start_col

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]


@dataclass(frozen=True)
class Slot:
    """A word position, numbered per direction in scan order."""

    index: int
    start_row: int
    start_col: int
    direction: Direction
    letters: Tuple[Optional[str], ...]

    @property
    def id(self) -> str:
        prefix = "AC" if self.direction == Direction.ACROSS else "DN"
        return f"{prefix}_{self.index}"

    @property
    def length(self) -> int:
        return len(self.letters)

    @property
    def start(self) -> Tuple[int, int]:
        return self.start_row, self.start_col

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]

    def is_filled(self) -> bool:
        return all(letter is not None for letter in self.letters)

    @property
    def text(self) -> Optional[str]:
        """The uppercase word in the slot, or ``None`` while any cell is empty."""

        if not self.is_filled():
            return None
        return "".join(letter for letter in self.letters if letter)

    def pattern(self) -> List[Optional[str]]:
        """Lowercase letter pattern, ``None`` marking wildcards."""

        return [letter.lower() if letter else None for letter in self.letters]

    def display_pattern(self) -> str:
        return "".join(letter or "_" for letter in self.letters)

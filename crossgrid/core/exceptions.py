"""Exception hierarchy for grid construction and validation.

The ``str()`` of every exception is the stable message shown to users, so
callers can print errors directly.
"""

from __future__ import annotations

from typing import Tuple

from .constants import MIN_GRID_SIZE, MIN_WORD_LENGTH, Direction


class CrosswordError(Exception):
    """Base exception for every grid failure."""


# ----------------------------------------------------------------------
# Structural rules (the block pattern)
# ----------------------------------------------------------------------
class StructuralError(CrosswordError):
    """The block pattern breaks a construction rule."""


class TooSmall(StructuralError):
    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(self._message())

    def _message(self) -> str:
        return (
            f"The grid is {self.rows}x{self.cols}; "
            f"it must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}"
        )


class NotSquare(TooSmall):
    def _message(self) -> str:
        return f"The grid is {self.rows}x{self.cols}; it must be square"


class AsymmetricBlocks(StructuralError):
    def __init__(self, cell: Tuple[int, int]) -> None:
        self.cell = cell
        super().__init__(
            f"The black squares are not placed symmetrically (cell {cell[0]},{cell[1]})"
        )


class TooManyBlocks(StructuralError):
    def __init__(self, percent: float, limit: int) -> None:
        self.percent = percent
        self.limit = limit
        super().__init__(f"More than {limit} percent of the puzzle squares are black")


class ShortRun(StructuralError):
    def __init__(
        self,
        position: Tuple[int, int],
        direction: Direction,
        length: int,
        minimum: int = MIN_WORD_LENGTH,
    ) -> None:
        self.position = position
        self.direction = direction
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"The {direction.label} word at {position[0]},{position[1]} "
            f"is shorter than {minimum} letters ({length})"
        )


class Disconnected(StructuralError):
    def __init__(self) -> None:
        super().__init__("The black squares cut the grid into separate pieces")


# ----------------------------------------------------------------------
# Content rules (the letters)
# ----------------------------------------------------------------------
class ContentError(CrosswordError):
    """A filled word breaks a content rule."""


class UnknownWord(ContentError):
    def __init__(self, word: str, position: Tuple[int, int], direction: Direction) -> None:
        self.word = word
        self.position = position
        self.direction = direction
        super().__init__(
            f"\"{word}\" ({direction.label} at {position[0]},{position[1]}) "
            "is not in the dictionary"
        )


class RepeatedWord(ContentError):
    def __init__(self, word: str, position: Tuple[int, int], direction: Direction) -> None:
        self.word = word
        self.position = position
        self.direction = direction
        super().__init__(
            f"The word \"{word}\" is repeated ({direction.label} at {position[0]},{position[1]})"
        )


# ----------------------------------------------------------------------
# Addressing
# ----------------------------------------------------------------------
class AddressingError(CrosswordError):
    """A caller referred to a slot that does not exist."""


class NoSlotAtIndex(AddressingError):
    def __init__(self, index: int, direction: Direction) -> None:
        self.index = index
        self.direction = direction
        super().__init__(f"There is no {direction.label} word at index {index}")


# ----------------------------------------------------------------------
# Resources
# ----------------------------------------------------------------------
class ResourceError(CrosswordError):
    """A dictionary or puzzle file could not be used."""


class DictionaryLoadError(ResourceError):
    """Raised when the word list cannot be read."""


class PuzzleFileError(ResourceError):
    """Raised when a puzzle file cannot be opened or written."""


class PuzzleFormatError(ResourceError):
    """Raised when a puzzle file does not describe a grid."""


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------
class GenerationError(CrosswordError):
    """Raised when the block generator exhausts its attempts."""


class FillError(CrosswordError):
    """Raised when the grid cannot be filled from the dictionary."""

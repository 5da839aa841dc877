"""Deterministic rule validation for grids.

Two independent checks are offered. :meth:`GridValidator.validate_base`
looks only at the block pattern; :meth:`GridValidator.validate_words` looks
only at the letters of complete slots. Both work on a snapshot of the grid
and report rule violations through a :class:`ValidationResult` instead of
raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.constants import MIN_GRID_SIZE, MIN_WORD_LENGTH, Direction
from ..core.exceptions import (AsymmetricBlocks, ContentError, CrosswordError,
                               Disconnected, NotSquare, RepeatedWord, ShortRun,
                               StructuralError, TooManyBlocks, TooSmall, UnknownWord)
from ..data.dictionary import WordDictionary
from .extractor import extract_slots
from .grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationRules:
    """Tunable construction rules; the defaults are the standard rule set."""

    min_word_length: int = MIN_WORD_LENGTH
    # Percentage ceiling on blocked squares; ``None`` disables the check.
    max_block_percent: Optional[int] = None
    forbid_repeats: bool = False


@dataclass
class ValidationResult:
    errors: List[CrosswordError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error(self) -> Optional[CrosswordError]:
        return self.errors[0] if self.errors else None

    @property
    def messages(self) -> List[str]:
        return [str(error) for error in self.errors]


class GridValidator:
    """Runs the structural and dictionary checks over a grid."""

    def __init__(self, rules: Optional[ValidationRules] = None) -> None:
        self.rules = rules or ValidationRules()

    # ------------------------------------------------------------------
    # Base (structure)
    # ------------------------------------------------------------------
    def validate_base(self, grid: CrosswordGrid) -> ValidationResult:
        snapshot = grid.snapshot()
        try:
            self._check_size(snapshot)
            self._check_symmetry(snapshot)
            if self.rules.max_block_percent is not None:
                self._check_block_count(snapshot, self.rules.max_block_percent)
            self._check_runs(snapshot)
            self._check_connected(snapshot)
        except StructuralError as exc:
            LOGGER.info("Base validation failed: %s", exc)
            return ValidationResult(errors=[exc])
        return ValidationResult()

    @staticmethod
    def _check_size(grid: CrosswordGrid) -> None:
        rows, cols = grid.bounds.rows, grid.bounds.cols
        if rows < MIN_GRID_SIZE or cols < MIN_GRID_SIZE:
            raise TooSmall(rows, cols)
        if rows != cols:
            raise NotSquare(rows, cols)

    @staticmethod
    def _check_symmetry(grid: CrosswordGrid) -> None:
        cell = grid.first_asymmetric_cell()
        if cell is not None:
            raise AsymmetricBlocks(cell)

    @staticmethod
    def _check_block_count(grid: CrosswordGrid, limit: int) -> None:
        percent = grid.block_ratio() * 100
        if percent > limit:
            raise TooManyBlocks(percent, limit)

    def _check_runs(self, grid: CrosswordGrid) -> None:
        for direction in (Direction.ACROSS, Direction.DOWN):
            for run in grid.runs(direction):
                if run.length < self.rules.min_word_length:
                    raise ShortRun(run.start, direction, run.length, self.rules.min_word_length)

    @staticmethod
    def _check_connected(grid: CrosswordGrid) -> None:
        if not grid.is_connected():
            raise Disconnected()

    # ------------------------------------------------------------------
    # Words (content)
    # ------------------------------------------------------------------
    def validate_words(self, grid: CrosswordGrid, dictionary: WordDictionary) -> ValidationResult:
        """Check every complete slot against ``dictionary``.

        Slots with an empty cell are skipped, so a partially filled grid is
        validated on its complete words only. Every unknown word is reported;
        ``result.error`` is the first in slot order.
        """

        errors: List[CrosswordError] = []
        seen: Dict[str, Tuple[int, int]] = {}
        checked = 0
        for slot in extract_slots(grid.snapshot(), self.rules.min_word_length):
            text = slot.text
            if text is None:
                continue
            checked += 1
            word = text.lower()
            try:
                if self.rules.forbid_repeats and word in seen:
                    raise RepeatedWord(word, slot.start, slot.direction)
                seen[word] = slot.start
                if not dictionary.contains(word):
                    raise UnknownWord(word, slot.start, slot.direction)
            except ContentError as exc:
                LOGGER.info("Word validation failed: %s", exc)
                errors.append(exc)
        LOGGER.debug("Checked %d complete slots", checked)
        return ValidationResult(errors=errors)


def validate_base(grid: CrosswordGrid, rules: Optional[ValidationRules] = None) -> ValidationResult:
    return GridValidator(rules).validate_base(grid)


def validate_words(
    grid: CrosswordGrid,
    dictionary: WordDictionary,
    rules: Optional[ValidationRules] = None,
) -> ValidationResult:
    return GridValidator(rules).validate_words(grid, dictionary)

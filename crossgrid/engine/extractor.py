"""Slot extraction: the numbered across and down word positions of a grid."""

from __future__ import annotations

from typing import List

from ..core.constants import MIN_WORD_LENGTH, Direction
from ..core.exceptions import NoSlotAtIndex
from ..core.models import Slot
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


def direction_slots(
    grid: CrosswordGrid,
    direction: Direction,
    min_length: int = MIN_WORD_LENGTH,
) -> List[Slot]:
    """Return the slots of one direction, indexed 0, 1, 2, ... in scan order.

    Across slots are discovered scanning rows top to bottom, left to right;
    down slots scanning columns left to right, top to bottom. Runs shorter
    than ``min_length`` never receive an index.
    """

    slots: List[Slot] = []
    for run in grid.runs(direction):
        if run.length < min_length:
            continue
        letters = tuple(grid.cells[r][c].letter for r, c in run.cells)
        slots.append(
            Slot(
                index=len(slots),
                start_row=run.start_row,
                start_col=run.start_col,
                direction=direction,
                letters=letters,
            )
        )
    return slots


def extract_slots(grid: CrosswordGrid, min_length: int = MIN_WORD_LENGTH) -> List[Slot]:
    """Derive every slot: all across slots first, then all down slots."""

    across = direction_slots(grid, Direction.ACROSS, min_length)
    down = direction_slots(grid, Direction.DOWN, min_length)
    LOGGER.debug("Extracted %d across and %d down slots", len(across), len(down))
    return across + down


def get_slot(grid: CrosswordGrid, index: int, direction: Direction) -> Slot:
    """Return slot ``index`` of ``direction`` or raise :class:`NoSlotAtIndex`."""

    slots = direction_slots(grid, direction)
    if index < 0 or index >= len(slots):
        raise NoSlotAtIndex(index, direction)
    return slots[index]

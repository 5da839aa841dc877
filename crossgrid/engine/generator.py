"""Random symmetric block placement.

The generator is best-effort. It always keeps the block pattern symmetric
and refuses placements that break connectivity. A placement must also leave
0 or at least 3 open cells before the next block or edge in every direction.
That check looks at the grid before a block pair goes in. On odd sizes a
cell and its partner can share the centre row or column, so a finished grid
may still hold a short run. Callers must run the base validator on the
result.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import DEFAULT_BLOCK_PERCENT, MIN_GRID_SIZE, MIN_WORD_LENGTH, Direction
from ..core.exceptions import GenerationError
from ..core.models import Cell
from .grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# Below this size no symmetric block keeps every run at least 3 long.
MIN_BLOCKED_SIZE = 5


@dataclass
class GeneratorConfig:
    size: int
    seed: Optional[int] = None
    block_percent: int = DEFAULT_BLOCK_PERCENT
    max_attempts: int = 50
    rng: Optional[random.Random] = None

    def target_blocks(self) -> int:
        if self.size < MIN_BLOCKED_SIZE:
            return 0
        return (self.size * self.size * self.block_percent) // 100


class BlockPatternGenerator:
    """Places blocks in symmetric pairs until the block budget is spent."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.rng = config.rng or random.Random(config.seed)

    def generate(self) -> CrosswordGrid:
        size = self.config.size
        if size < MIN_GRID_SIZE:
            raise GenerationError(f"Cannot generate a {size}x{size} grid; the minimum is {MIN_GRID_SIZE}")
        if self.config.max_attempts < 1:
            raise GenerationError("max_attempts must be at least 1")

        target = self.config.target_blocks()
        if target == 0:
            LOGGER.info("Size %s takes no blocks; returning an open grid", size)
            return CrosswordGrid(size)

        for attempt in range(1, self.config.max_attempts + 1):
            LOGGER.info("Block placement attempt %s/%s", attempt, self.config.max_attempts)
            grid = CrosswordGrid(size)
            placed = self._place_blocks(grid, target)
            if placed >= target:
                LOGGER.info("Placed %d blocks on a %sx%s grid", placed, size, size)
                return grid
            LOGGER.warning("Attempt %s placed only %d/%d blocks", attempt, placed, target)
        raise GenerationError(
            f"Unable to place {target} blocks on a {size}x{size} grid after "
            f"{self.config.max_attempts} attempts"
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_blocks(self, grid: CrosswordGrid, target: int) -> int:
        """Sweep the shuffled candidates until the target is met or a sweep places nothing.

        Blocks placed in one sweep can make other cells eligible (a cell next
        to a block has distance 0 on that side), so sweeps repeat.
        """

        candidates = self._candidate_cells(grid)
        self.rng.shuffle(candidates)
        placed = 0
        progress = True
        while placed < target and progress:
            progress = False
            for row, col in candidates:
                if placed >= target:
                    break
                if grid.is_blocked(row, col):
                    continue
                partner = grid.symmetric_partner(row, col)
                if not (valid_block_placement(grid, row, col) and valid_block_placement(grid, *partner)):
                    continue
                pair = {(row, col), partner}
                for r, c in pair:
                    grid.set_block(r, c)
                if not grid.is_connected():
                    LOGGER.debug("Block pair at (%s,%s) would disconnect the grid", row, col)
                    for r, c in pair:
                        grid.set_cell(r, c, Cell.empty())
                    continue
                placed += len(pair)
                progress = True
        return placed

    @staticmethod
    def _candidate_cells(grid: CrosswordGrid) -> List[Tuple[int, int]]:
        """One representative per symmetric pair, the centre cell included."""

        cells: List[Tuple[int, int]] = []
        for row, col, _ in grid.iter_cells():
            if (row, col) <= grid.symmetric_partner(row, col):
                cells.append((row, col))
        return cells


def ok_distance(grid: CrosswordGrid, row: int, col: int, dr: int, dc: int) -> bool:
    """Open cells from ``(row, col)`` (exclusive) to the next block or edge: 0 or >= 3."""

    distance = 0
    r, c = row + dr, col + dc
    while grid.bounds.contains(r, c) and not grid.cells[r][c].is_blocked():
        distance += 1
        r += dr
        c += dc
    return distance == 0 or distance >= MIN_WORD_LENGTH


def valid_block_placement(grid: CrosswordGrid, row: int, col: int) -> bool:
    """Whether blocking ``(row, col)`` leaves long enough stretches on all four sides."""

    for direction in (Direction.ACROSS, Direction.DOWN):
        dr, dc = direction.step
        if not ok_distance(grid, row, col, dr, dc):
            return False
        if not ok_distance(grid, row, col, -dr, -dc):
            return False
    return True


def generate(size: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> CrosswordGrid:
    return BlockPatternGenerator(GeneratorConfig(size=size, seed=seed, rng=rng)).generate()

"""Grid representation and structural queries."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import ORTHOGONAL_STEPS, Bounds, CellType, Direction
from ..core.models import Cell, Run
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class CrosswordGrid:
    """A rectangular matrix of cells addressed by ``(row, col)`` from the top left.

    The shape is fixed once created. Letters may be set and cleared, and the
    generator may block cells; everything else derives from the cells on
    demand, so queries never return stale state.
    """

    def __init__(self, rows: int, cols: Optional[int] = None) -> None:
        cols = rows if cols is None else cols
        if rows < 0 or cols < 0:
            raise ValueError("Grid dimensions must be non-negative")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Cell]] = [[Cell.empty() for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "CrosswordGrid":
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All grid rows must have the same width")
        grid = cls(len(rows), width)
        grid.cells = [list(row) for row in rows]
        return grid

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrosswordGrid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"CrosswordGrid({self.bounds.rows}x{self.bounds.cols})"

    @property
    def size(self) -> int:
        return self.bounds.rows

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _check(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell ({row},{col}) outside {self.bounds.rows}x{self.bounds.cols} grid")

    def cell(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self.cells[row][col]

    def is_blocked(self, row: int, col: int) -> bool:
        return self.cell(row, col).is_blocked()

    def letter_at(self, row: int, col: int) -> Optional[str]:
        return self.cell(row, col).letter

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        self._check(row, col)
        self.cells[row][col] = cell

    def set_letter(self, row: int, col: int, letter: str) -> None:
        if self.is_blocked(row, col):
            raise ValueError(f"Cannot write a letter into blocked cell ({row},{col})")
        self.cells[row][col] = Cell.of_letter(letter)

    def clear_letter(self, row: int, col: int) -> None:
        if self.is_blocked(row, col):
            raise ValueError(f"Cannot clear blocked cell ({row},{col})")
        self.cells[row][col] = Cell.empty()

    def set_block(self, row: int, col: int) -> None:
        self.set_cell(row, col, Cell.blocked())

    def snapshot(self) -> "CrosswordGrid":
        """Return an independent copy; cells are immutable so a shallow row copy suffices."""

        return CrosswordGrid.from_rows(self.cells)

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def line(self, index: int, direction: Direction) -> List[Cell]:
        """Return row ``index`` for ACROSS or column ``index`` for DOWN."""

        if direction == Direction.ACROSS:
            if not 0 <= index < self.bounds.rows:
                raise IndexError(f"Row {index} outside grid")
            return list(self.cells[index])
        if not 0 <= index < self.bounds.cols:
            raise IndexError(f"Column {index} outside grid")
        return [row[index] for row in self.cells]

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------
    def symmetric_partner(self, row: int, col: int) -> Tuple[int, int]:
        """Return the cell reached by rotating ``(row, col)`` 180 degrees."""

        self._check(row, col)
        return self.bounds.rows - 1 - row, self.bounds.cols - 1 - col

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def runs(self, direction: Direction) -> Iterator[Run]:
        """Yield every maximal non-blocked run along ``direction``.

        Rows are scanned top to bottom for ACROSS and columns left to right
        for DOWN. Each call starts a fresh scan.
        """

        lines = self.bounds.rows if direction == Direction.ACROSS else self.bounds.cols
        for index in range(lines):
            start: Optional[int] = None
            line = self.line(index, direction)
            for offset, cell in enumerate(line + [Cell.blocked()]):
                if not cell.is_blocked():
                    if start is None:
                        start = offset
                    continue
                if start is not None:
                    yield self._make_run(index, start, offset - start, direction)
                    start = None

    @staticmethod
    def _make_run(index: int, start: int, length: int, direction: Direction) -> Run:
        if direction == Direction.ACROSS:
            return Run(start_row=index, start_col=start, direction=direction, length=length)
        return Run(start_row=start, start_col=index, direction=direction, length=length)

    def open_cells(self) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, cell in self.iter_cells() if not cell.is_blocked()]

    def count(self, cell_type: CellType) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if cell.type == cell_type)

    def block_ratio(self) -> float:
        total = self.bounds.rows * self.bounds.cols
        return self.count(CellType.BLOCKED) / total if total else 0.0

    def is_connected(self) -> bool:
        """True iff the non-blocked cells form one 4-connected region.

        A grid without any open cell is not connected.
        """

        open_cells = self.open_cells()
        if not open_cells:
            return False
        seen: Set[Tuple[int, int]] = {open_cells[0]}
        queue = deque([open_cells[0]])
        while queue:
            row, col = queue.popleft()
            for nr, nc in self.neighbors(row, col):
                if (nr, nc) in seen or self.cells[nr][nc].is_blocked():
                    continue
                seen.add((nr, nc))
                queue.append((nr, nc))
        LOGGER.debug("Flood fill reached %d/%d open cells", len(seen), len(open_cells))
        return len(seen) == len(open_cells)

    def is_symmetric(self) -> bool:
        return self.first_asymmetric_cell() is None

    def first_asymmetric_cell(self) -> Optional[Tuple[int, int]]:
        """Return the first cell, row-major, whose block state differs from its partner."""

        for row, col, cell in self.iter_cells():
            pr, pc = self.symmetric_partner(row, col)
            if cell.is_blocked() != self.cells[pr][pc].is_blocked():
                return row, col
        return None

"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import CellType, Direction
from ..engine.extractor import extract_slots

if TYPE_CHECKING:
    from ..data.dictionary import WordDictionary
    from ..engine.grid import CrosswordGrid


def format_grid_with_coords(grid: CrosswordGrid) -> str:
    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.bounds.rows):
        row_cells = [grid.cell(r, c).glyph for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: CrosswordGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid with row and column numbers."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid_with_coords(grid), file=stream)


def print_grid_stats(
    grid: CrosswordGrid,
    dictionary: Optional[WordDictionary] = None,
    *,
    stream=None,
) -> None:
    """Print geometry and slot statistics, plus unknown words when a dictionary is given."""

    stream = stream or sys.stdout
    rows, cols = grid.bounds.rows, grid.bounds.cols
    total_cells = rows * cols
    blocked = grid.count(CellType.BLOCKED)
    letters = grid.count(CellType.LETTER)
    empty = grid.count(CellType.EMPTY)

    print("--- Grid ---", file=stream)
    print(f"  Size:          {rows} x {cols} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Blocks:        {blocked} ({blocked / total_cells * 100:.0f}%)", file=stream)
    print(f"  Letters:       {letters}", file=stream)
    if empty:
        print(f"  Unfilled:      {empty}", file=stream)

    slots = extract_slots(grid)
    across = [s for s in slots if s.direction == Direction.ACROSS]
    lengths = [s.length for s in slots]
    length_dist = Counter(lengths)
    filled = [s for s in slots if s.is_filled()]

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Total slots:   {len(slots)} ({len(across)} across, {len(slots) - len(across)} down)", file=stream)
    print(f"  Complete:      {len(filled)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{length}:{count}" for length, count in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if dictionary is not None and filled:
        unknown = [s.text for s in filled if s.text and not dictionary.contains(s.text)]
        print(file=stream)
        print("--- Dictionary ---", file=stream)
        print(f"  Known words:   {len(filled) - len(unknown)}/{len(filled)}", file=stream)
        if unknown:
            print(f"  Unknown:       {', '.join(unknown)}", file=stream)

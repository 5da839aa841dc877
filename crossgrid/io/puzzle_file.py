"""Reading and writing the glyph layout used for stored puzzles.

A puzzle file holds one line per row. Each cell is a single glyph followed
by a space: ``▩`` for a block, ``▢`` for an empty square, or an uppercase
letter.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.constants import BLOCK_GLYPH, EMPTY_GLYPH
from ..core.exceptions import PuzzleFileError, PuzzleFormatError
from ..core.models import Cell
from ..engine.grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_PUZZLE_DIR = Path("puzzles")
PUZZLE_SUFFIX = ".txt"


def format_grid(grid: CrosswordGrid) -> str:
    return "".join(
        "".join(f"{cell.glyph} " for cell in row) + "\n" for row in grid.cells
    )


def parse_cell(token: str) -> Cell:
    char = token.strip()
    if len(char) != 1:
        raise PuzzleFormatError(f"Invalid puzzle file format: unexpected cell {token!r}")
    if char == BLOCK_GLYPH:
        return Cell.blocked()
    if char == EMPTY_GLYPH:
        return Cell.empty()
    try:
        return Cell.of_letter(char)
    except ValueError:
        raise PuzzleFormatError(f"Invalid puzzle file format: unexpected cell {token!r}") from None


def parse_grid(text: str) -> CrosswordGrid:
    rows: List[List[Cell]] = []
    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        rows.append([parse_cell(token) for token in tokens])
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise PuzzleFormatError(
            f"Invalid puzzle file format: rows have differing widths {sorted(widths)}"
        )
    return CrosswordGrid.from_rows(rows)


class PuzzleStore:
    """Named puzzles kept as ``<puzzle_dir>/<name>.txt``."""

    def __init__(self, puzzle_dir: Path | str = DEFAULT_PUZZLE_DIR) -> None:
        self.puzzle_dir = Path(puzzle_dir)
        try:
            self.puzzle_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PuzzleFileError(f"Error creating dir {self.puzzle_dir}: {exc}") from exc

    def path_for(self, name: str) -> Path:
        return self.puzzle_dir / f"{name}{PUZZLE_SUFFIX}"

    def save(self, name: str, grid: CrosswordGrid) -> Path:
        path = self.path_for(name)
        try:
            path.write_text(format_grid(grid), encoding="utf-8")
        except OSError as exc:
            raise PuzzleFileError(f"Unable create the file '{path}'") from exc
        LOGGER.info("Puzzle saved: %s", path)
        return path

    def load(self, name: str) -> CrosswordGrid:
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(f"Puzzle file not in utf8: {path}") from exc
        except OSError as exc:
            raise PuzzleFileError(f"Unable open the file '{path}'") from exc
        grid = parse_grid(text)
        LOGGER.debug("Loaded %r from %s", grid, path)
        return grid

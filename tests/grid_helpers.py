"""Shared fixtures: build grids from compact row strings.

``#`` is a block, ``.`` an empty square, any letter a filled square.
"""

from crossgrid.core.models import Cell
from crossgrid.engine.grid import CrosswordGrid


def make_grid(*rows: str) -> CrosswordGrid:
    cells = []
    for row in rows:
        parsed = []
        for char in row:
            if char == "#":
                parsed.append(Cell.blocked())
            elif char == ".":
                parsed.append(Cell.empty())
            else:
                parsed.append(Cell.of_letter(char))
        cells.append(parsed)
    return CrosswordGrid.from_rows(cells)


# Corners blocked; every across and down word is one of EAR, EMBER, ABUSE, RESIN, REN.
CORNER_SQUARE = (
    "#EAR#",
    "EMBER",
    "ABUSE",
    "RESIN",
    "#REN#",
)
CORNER_SQUARE_WORDS = ["ear", "ember", "abuse", "resin", "ren"]

"""Grid filling: CP-SAT dictionary autofill and random letters."""

from __future__ import annotations

import random
import string
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Optional, Set, Tuple, Union

from ortools.sat.python import cp_model

from ..core.exceptions import FillError
from ..core.models import Cell, Slot
from ..data.dictionary import WordDictionary
from .extractor import extract_slots
from .grid import CrosswordGrid
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

# A cell is either a solver variable or an already fixed letter code.
CellVar = Union[cp_model.IntVar, int]


@dataclass
class SolverConfig:
    timeout_seconds: float = 30.0
    max_candidates: int = 8000
    allow_repeats: bool = False
    num_workers: int = 4


def fill_grid(
    grid: CrosswordGrid,
    dictionary: WordDictionary,
    config: Optional[SolverConfig] = None,
) -> CrosswordGrid:
    """Fill every slot with dictionary words via CP-SAT.

    Letters already in the grid are kept. Returns a filled copy; ``grid`` is
    left untouched. Raises :class:`FillError` when some slot has no candidate
    or the solver finds no assignment within the time limit.
    """

    config = config or SolverConfig()
    result = grid.snapshot()
    slots = extract_slots(result)
    if not slots:
        return result

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell letter variables
    # ------------------------------------------------------------------
    cell_vars: Dict[Tuple[int, int], CellVar] = {}
    for slot in slots:
        for r, c in slot.cells:
            if (r, c) in cell_vars:
                continue
            existing = result.letter_at(r, c)
            if existing:
                cell_vars[(r, c)] = _code(existing)
            else:
                cell_vars[(r, c)] = model.new_int_var(0, 25, f"L_{r}_{c}")

    # ------------------------------------------------------------------
    # Step 2: Per-slot candidates + table constraints
    # ------------------------------------------------------------------
    placed: Set[str] = set()
    if not config.allow_repeats:
        placed = {slot.text.lower() for slot in slots if slot.is_filled()}
    for slot in slots:
        # Words already in the grid may not be used again in another slot.
        banned = None if slot.is_filled() else placed
        candidates = dictionary.find_candidates(
            slot.length, pattern=slot.pattern(), limit=config.max_candidates, banned=banned
        )
        if not candidates:
            raise FillError(
                f"No dictionary word fits the {slot.direction.label} slot "
                f"{slot.index} ({slot.display_pattern()})"
            )
        cell_list = [cell_vars[cell] for cell in slot.cells]
        if any(not isinstance(v, int) for v in cell_list):
            model.add_allowed_assignments(
                cell_list, [[_code(ch) for ch in word] for word in candidates]
            )

    # ------------------------------------------------------------------
    # Step 3: Uniqueness constraints
    # ------------------------------------------------------------------
    if not config.allow_repeats:
        by_length: Dict[int, List[Slot]] = defaultdict(list)
        for slot in slots:
            by_length[slot.length].append(slot)
        for group in by_length.values():
            for s1, s2 in combinations(group, 2):
                _add_differ_constraint(model, cell_vars, s1, s2)

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = config.timeout_seconds
    solver.parameters.num_workers = config.num_workers

    LOGGER.info(
        "CP-SAT: %d slots, %d cell vars, solving (timeout=%0.1fs)...",
        len(slots),
        sum(1 for v in cell_vars.values() if not isinstance(v, int)),
        config.timeout_seconds,
    )
    status = solver.solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        raise FillError("No combination of dictionary words fills the grid")
    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    for (r, c), var in cell_vars.items():
        value = var if isinstance(var, int) else solver.value(var)
        result.set_letter(r, c, _letter(value))
    return result


def _code(letter: str) -> int:
    return ord(letter.upper()) - ord("A")


def _letter(code: int) -> str:
    return chr(code + ord("A"))


def _add_differ_constraint(
    model: cp_model.CpModel,
    cell_vars: Dict[Tuple[int, int], CellVar],
    s1: Slot,
    s2: Slot,
) -> None:
    """Ensure two same-length slots cannot contain identical words."""

    diffs = []
    cells1, cells2 = s1.cells, s2.cells
    for pos in range(s1.length):
        v1 = cell_vars[cells1[pos]]
        v2 = cell_vars[cells2[pos]]
        if isinstance(v1, int) and isinstance(v2, int):
            if v1 != v2:
                return  # Already guaranteed different
            continue
        b = model.new_bool_var(f"d_{s1.id}_{s2.id}_{pos}")
        model.add(v1 != v2).only_enforce_if(b)
        model.add(v1 == v2).only_enforce_if(~b)
        diffs.append(b)
    if not diffs:
        raise FillError(f"The word \"{s1.text}\" is repeated")
    model.add_bool_or(diffs)


def random_fill(grid: CrosswordGrid, rng: Optional[random.Random] = None) -> CrosswordGrid:
    """Return a copy of ``grid`` with every empty cell holding a random letter."""

    rng = rng or random.Random()
    result = grid.snapshot()
    filled = 0
    for r, c, cell in grid.iter_cells():
        if cell.is_empty():
            result.set_cell(r, c, Cell.of_letter(rng.choice(string.ascii_uppercase)))
            filled += 1
    LOGGER.info("Filled %d empty cells with random letters", filled)
    return result

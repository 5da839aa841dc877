import unittest

from crossgrid.core.constants import CellType, Direction
from crossgrid.core.models import Cell, Run
from crossgrid.engine.grid import CrosswordGrid

from grid_helpers import make_grid


class GridAccessTests(unittest.TestCase):
    def test_new_grid_is_empty_and_square(self) -> None:
        grid = CrosswordGrid(4)
        self.assertEqual(grid.size, 4)
        self.assertTrue(grid.bounds.is_square)
        self.assertEqual(grid.count(CellType.EMPTY), 16)

    def test_letter_access(self) -> None:
        grid = make_grid("C.#", "...", "#..")
        self.assertEqual(grid.letter_at(0, 0), "C")
        self.assertIsNone(grid.letter_at(0, 1))
        self.assertTrue(grid.is_blocked(0, 2))
        self.assertFalse(grid.is_blocked(1, 1))

    def test_out_of_range_access_raises_index_error(self) -> None:
        grid = CrosswordGrid(3)
        for row, col in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
            with self.assertRaises(IndexError):
                grid.is_blocked(row, col)
            with self.assertRaises(IndexError):
                grid.letter_at(row, col)

    def test_set_and_clear_letter(self) -> None:
        grid = CrosswordGrid(3)
        grid.set_letter(1, 1, "q")
        self.assertEqual(grid.letter_at(1, 1), "Q")
        grid.clear_letter(1, 1)
        self.assertTrue(grid.cell(1, 1).is_empty())

    def test_letters_cannot_go_into_blocks(self) -> None:
        grid = make_grid("#..", "...", "..#")
        with self.assertRaises(ValueError):
            grid.set_letter(0, 0, "A")

    def test_invalid_letters_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Cell.of_letter("1")
        with self.assertRaises(ValueError):
            Cell.of_letter("ab")

    def test_snapshot_is_independent(self) -> None:
        grid = CrosswordGrid(3)
        copy = grid.snapshot()
        grid.set_letter(0, 0, "A")
        self.assertIsNone(copy.letter_at(0, 0))
        self.assertNotEqual(grid, copy)

    def test_from_rows_rejects_ragged_rows(self) -> None:
        with self.assertRaises(ValueError):
            CrosswordGrid.from_rows([[Cell.empty()] * 3, [Cell.empty()] * 2])


class GridStructureTests(unittest.TestCase):
    def test_symmetric_partner_is_an_involution(self) -> None:
        grid = CrosswordGrid(5)
        for row in range(5):
            for col in range(5):
                partner = grid.symmetric_partner(row, col)
                self.assertEqual(grid.symmetric_partner(*partner), (row, col))
        self.assertEqual(grid.symmetric_partner(0, 1), (4, 3))
        self.assertEqual(grid.symmetric_partner(2, 2), (2, 2))

    def test_runs_across_and_down(self) -> None:
        grid = make_grid(
            "#...#",
            ".....",
            "..#..",
            ".....",
            "#...#",
        )
        across = list(grid.runs(Direction.ACROSS))
        self.assertEqual(across[0], Run(0, 1, Direction.ACROSS, 3))
        self.assertEqual(across[2], Run(2, 0, Direction.ACROSS, 2))
        self.assertEqual(across[3], Run(2, 3, Direction.ACROSS, 2))
        self.assertEqual(len(across), 6)

        down = list(grid.runs(Direction.DOWN))
        self.assertEqual(down[0], Run(1, 0, Direction.DOWN, 3))
        self.assertEqual(down[1], Run(0, 1, Direction.DOWN, 5))
        self.assertEqual([run.start for run in down[2:4]], [(0, 2), (3, 2)])

    def test_runs_skip_fully_blocked_lines_and_restart(self) -> None:
        grid = make_grid("...", "###", "...")
        first = list(grid.runs(Direction.ACROSS))
        second = list(grid.runs(Direction.ACROSS))
        self.assertEqual(first, second)
        self.assertEqual([run.start for run in first], [(0, 0), (2, 0)])

    def test_run_cells(self) -> None:
        run = Run(1, 2, Direction.DOWN, 3)
        self.assertEqual(run.cells, [(1, 2), (2, 2), (3, 2)])

    def test_connected_grid(self) -> None:
        grid = make_grid("#..", "...", "..#")
        self.assertTrue(grid.is_connected())

    def test_split_grid_is_not_connected(self) -> None:
        grid = make_grid("...", "###", "...")
        self.assertFalse(grid.is_connected())

    def test_fully_blocked_grid_is_not_connected(self) -> None:
        grid = make_grid("###", "###", "###")
        self.assertFalse(grid.is_connected())

    def test_first_asymmetric_cell(self) -> None:
        grid = make_grid("#..", "...", "...")
        self.assertFalse(grid.is_symmetric())
        self.assertEqual(grid.first_asymmetric_cell(), (0, 0))
        self.assertTrue(make_grid("#..", "...", "..#").is_symmetric())

    def test_block_ratio(self) -> None:
        grid = make_grid("#...", "....", "....", "...#")
        self.assertAlmostEqual(grid.block_ratio(), 2 / 16)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

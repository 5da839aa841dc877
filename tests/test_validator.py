import unittest

from crossgrid.core.constants import Direction
from crossgrid.core.exceptions import (AsymmetricBlocks, Disconnected, NotSquare, RepeatedWord,
                                       ShortRun, TooManyBlocks, TooSmall, UnknownWord)
from crossgrid.data.dictionary import WordDictionary
from crossgrid.engine.grid import CrosswordGrid
from crossgrid.engine.validator import GridValidator, ValidationRules, validate_base, validate_words

from grid_helpers import CORNER_SQUARE, CORNER_SQUARE_WORDS, make_grid


SPLIT_GRID = (
    ".......",
    ".......",
    ".......",
    "#######",
    ".......",
    ".......",
    ".......",
)


class BaseValidationTests(unittest.TestCase):
    def test_empty_grids_are_valid(self) -> None:
        for size in (3, 4, 10):
            result = validate_base(CrosswordGrid(size))
            self.assertTrue(result.ok, result.messages)
            self.assertIsNone(result.error)

    def test_corner_blocks_are_valid(self) -> None:
        self.assertTrue(validate_base(make_grid(*CORNER_SQUARE)).ok)

    def test_too_small(self) -> None:
        result = validate_base(CrosswordGrid(2))
        self.assertIsInstance(result.error, TooSmall)
        self.assertEqual((result.error.rows, result.error.cols), (2, 2))
        self.assertIsInstance(validate_base(CrosswordGrid(0)).error, TooSmall)

    def test_not_square(self) -> None:
        result = validate_base(CrosswordGrid(3, 4))
        self.assertIsInstance(result.error, NotSquare)
        self.assertIsInstance(result.error, TooSmall)

    def test_asymmetric_blocks_report_first_cell(self) -> None:
        grid = make_grid(
            "....#",
            ".....",
            ".....",
            ".....",
            ".....",
        )
        result = validate_base(grid)
        self.assertIsInstance(result.error, AsymmetricBlocks)
        self.assertEqual(result.error.cell, (0, 4))

    def test_short_run(self) -> None:
        grid = make_grid(
            "..#..",
            ".....",
            ".....",
            ".....",
            "..#..",
        )
        result = validate_base(grid)
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, ShortRun)
        self.assertEqual(result.error.position, (0, 0))
        self.assertEqual(result.error.direction, Direction.ACROSS)
        self.assertEqual(result.error.length, 2)

    def test_short_down_run(self) -> None:
        grid = make_grid(
            ".....",
            ".....",
            "#...#",
            ".....",
            ".....",
        )
        result = validate_base(grid)
        self.assertIsInstance(result.error, ShortRun)
        self.assertEqual(result.error.direction, Direction.DOWN)
        self.assertEqual(result.error.position, (0, 0))

    def test_short_run_message_uses_configured_minimum(self) -> None:
        grid = make_grid("#...#", ".....", ".....", ".....", "#...#")
        result = validate_base(grid, ValidationRules(min_word_length=4))
        self.assertIsInstance(result.error, ShortRun)
        self.assertEqual(result.error.minimum, 4)
        self.assertEqual(str(result.error), "The across word at 0,1 is shorter than 4 letters (3)")

    def test_symmetry_checked_before_runs(self) -> None:
        grid = make_grid("..#..", ".....", ".....", ".....", ".....")
        self.assertIsInstance(validate_base(grid).error, AsymmetricBlocks)

    def test_disconnected(self) -> None:
        grid = make_grid(*SPLIT_GRID)
        self.assertIsInstance(validate_base(grid).error, Disconnected)

    def test_fully_blocked_grid_fails(self) -> None:
        grid = make_grid("###", "###", "###")
        self.assertIsInstance(validate_base(grid).error, Disconnected)

    def test_block_density_rule_is_opt_in(self) -> None:
        grid = make_grid(
            "#...#",
            ".....",
            ".....",
            ".....",
            "#...#",
        )
        self.assertTrue(validate_base(grid).ok)
        result = validate_base(grid, ValidationRules(max_block_percent=10))
        self.assertIsInstance(result.error, TooManyBlocks)
        self.assertTrue(validate_base(grid, ValidationRules(max_block_percent=16)).ok)

    def test_validation_does_not_mutate_grid(self) -> None:
        grid = make_grid(*CORNER_SQUARE)
        before = grid.snapshot()
        GridValidator().validate_base(grid)
        self.assertEqual(grid, before)

    def test_messages_are_stable(self) -> None:
        grid = make_grid(*SPLIT_GRID)
        self.assertEqual(
            validate_base(grid).messages,
            ["The black squares cut the grid into separate pieces"],
        )


class WordValidationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = WordDictionary(CORNER_SQUARE_WORDS)

    def test_filled_grid_with_known_words(self) -> None:
        grid = make_grid(*CORNER_SQUARE)
        self.assertTrue(validate_base(grid).ok)
        self.assertTrue(validate_words(grid, self.dictionary).ok)

    def test_unknown_word(self) -> None:
        grid = make_grid(*CORNER_SQUARE)
        grid.set_letter(4, 3, "D")
        result = validate_words(grid, self.dictionary)
        self.assertFalse(result.ok)
        error = result.error
        self.assertIsInstance(error, UnknownWord)
        self.assertEqual(error.word, "red")
        self.assertEqual(error.position, (4, 1))
        self.assertEqual(error.direction, Direction.ACROSS)
        # RESIN down becomes RESID as well
        self.assertEqual(len(result.errors), 2)
        self.assertEqual(result.errors[1].word, "resid")
        self.assertEqual(result.errors[1].direction, Direction.DOWN)

    def test_partial_slots_are_skipped(self) -> None:
        grid = make_grid(*CORNER_SQUARE)
        grid.clear_letter(2, 2)
        grid.set_letter(0, 1, "X")
        result = validate_words(grid, self.dictionary)
        self.assertEqual([e.word for e in result.errors], ["xar", "xmber"])

    def test_empty_grid_has_no_words_to_reject(self) -> None:
        self.assertTrue(validate_words(CrosswordGrid(5), WordDictionary([])).ok)

    def test_repeats_are_rejected_when_requested(self) -> None:
        grid = make_grid(*CORNER_SQUARE)
        result = validate_words(grid, self.dictionary, ValidationRules(forbid_repeats=True))
        self.assertIsInstance(result.error, RepeatedWord)
        self.assertEqual(result.error.word, "ear")
        self.assertEqual(result.error.direction, Direction.DOWN)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

import unittest

from crossgrid.core.constants import Direction
from crossgrid.core.exceptions import NoSlotAtIndex
from crossgrid.data.dictionary import WordDictionary
from crossgrid.engine.suggest import SuggestionEngine, suggest

from grid_helpers import make_grid


def c_a_grid():
    # Down slot 0 reads C _ A _ _
    return make_grid(
        "C....",
        ".....",
        "A....",
        ".....",
        ".....",
    )


class SuggestionTests(unittest.TestCase):
    def test_matches_follow_dictionary_order(self) -> None:
        dictionary = WordDictionary(["chain", "charm"])
        self.assertEqual(suggest(c_a_grid(), 0, Direction.DOWN, dictionary), ["chain", "charm"])
        reversed_dictionary = WordDictionary(["charm", "chain"])
        self.assertEqual(
            suggest(c_a_grid(), 0, Direction.DOWN, reversed_dictionary), ["charm", "chain"]
        )

    def test_limit_caps_results(self) -> None:
        dictionary = WordDictionary(["chain", "charm"])
        self.assertEqual(suggest(c_a_grid(), 0, Direction.DOWN, dictionary, limit=1), ["chain"])
        self.assertEqual(suggest(c_a_grid(), 0, Direction.DOWN, dictionary, limit=0), [])

    def test_suggestions_fit_slot(self) -> None:
        dictionary = WordDictionary(["chain", "cobra", "coat", "chart", "clamp", "cease"])
        grid = c_a_grid()
        engine = SuggestionEngine(dictionary)
        for word in engine.suggest(grid, 0, Direction.DOWN):
            self.assertEqual(len(word), 5)
            self.assertEqual(word[0], "c")
            self.assertEqual(word[2], "a")
        self.assertEqual(engine.suggest(grid, 0, Direction.DOWN), ["chain", "chart", "clamp", "cease"])

    def test_across_slot_uses_row_letters(self) -> None:
        dictionary = WordDictionary(["chain", "charm", "coast"])
        self.assertEqual(suggest(c_a_grid(), 0, Direction.ACROSS, dictionary), ["chain", "charm", "coast"])

    def test_no_match_is_empty(self) -> None:
        dictionary = WordDictionary(["zesty"])
        self.assertEqual(suggest(c_a_grid(), 0, Direction.DOWN, dictionary), [])

    def test_missing_slot(self) -> None:
        grid = make_grid(
            "...",
            "###",
            "...",
        )
        with self.assertRaises(NoSlotAtIndex) as ctx:
            suggest(grid, 0, Direction.DOWN, WordDictionary(["cat"]))
        self.assertEqual((ctx.exception.index, ctx.exception.direction), (0, Direction.DOWN))

    def test_grid_is_not_mutated(self) -> None:
        grid = c_a_grid()
        before = grid.snapshot()
        suggest(grid, 0, Direction.DOWN, WordDictionary(["chain"]))
        self.assertEqual(grid, before)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

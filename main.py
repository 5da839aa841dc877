"""CLI entrypoint for building and checking crossword grids."""

from __future__ import annotations

import argparse
import os
import random
import sys
from pathlib import Path
from typing import Callable, Dict

from crossgrid.core.constants import Direction
from crossgrid.core.exceptions import (CrosswordError, FillError, GenerationError,
                                       NoSlotAtIndex, ResourceError)
from crossgrid.data.dictionary import DictionaryConfig, WordDictionary
from crossgrid.engine.generator import BlockPatternGenerator, GeneratorConfig
from crossgrid.engine.solver import SolverConfig, fill_grid, random_fill
from crossgrid.engine.suggest import SuggestionEngine
from crossgrid.engine.validator import GridValidator, ValidationRules
from crossgrid.io.puzzle_file import PuzzleStore, format_grid
from crossgrid.utils.logger import configure_logging, get_logger
from crossgrid.utils.pretty import pretty_print_grid, print_grid_stats


LOGGER = get_logger("crossgrid.cli")

DEFAULT_DICTIONARY = os.environ.get("CROSSGRID_DICTIONARY", "./english3.txt")
DEFAULT_PUZZLE_DIR = os.environ.get("CROSSGRID_PUZZLE_DIR", "puzzles")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A command line utility to help build crossword puzzles",
    )
    parser.add_argument("name", help="Puzzle name; stored as <puzzle-dir>/<name>.txt")
    parser.add_argument(
        "--puzzle-dir",
        type=Path,
        default=Path(DEFAULT_PUZZLE_DIR),
        help="Directory holding puzzle files (env CROSSGRID_PUZZLE_DIR)",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path(DEFAULT_DICTIONARY),
        help="Newline-delimited word list (env CROSSGRID_DICTIONARY)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Generate a new, blank crossword puzzle")
    new.add_argument("size", type=int, nargs="?", default=3, help="Grid size (default 3)")
    new.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    new.add_argument("--max-attempts", type=int, default=50, help="Block placement attempts")

    display = commands.add_parser("display", help="Display the puzzle")
    display.add_argument("--coords", action="store_true", help="Show row and column numbers")

    stats = commands.add_parser("stats", help="Show grid and word statistics")
    stats.add_argument("--words", action="store_true", help="Also check words against the dictionary")

    check_base = commands.add_parser("check-base", help="Validate the base grid of a puzzle")
    check_base.add_argument(
        "--max-block-percent",
        type=int,
        default=None,
        help="Also reject grids with more than this percentage of black squares",
    )

    check_words = commands.add_parser("check-words", help="Validate the puzzle's words")
    check_words.add_argument("--no-repeats", action="store_true", help="Reject repeated words")

    suggest = commands.add_parser("suggest", help="Suggest dictionary words for a slot")
    suggest.add_argument("index", type=int, help="Slot number within the direction, from 0")
    suggest.add_argument("direction", type=str, help="across or down")
    suggest.add_argument("limit", type=int, nargs="?", default=None, help="Maximum suggestions")

    random_fill_cmd = commands.add_parser("random-fill", help="Fill a puzzle with random letters")
    random_fill_cmd.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")

    fill = commands.add_parser("fill", help="Fill every slot with dictionary words")
    fill.add_argument("--timeout", type=float, default=30.0, help="Solver time limit in seconds")
    fill.add_argument("--allow-repeats", action="store_true", help="Allow a word to appear twice")
    return parser


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------
def cmd_new(args: argparse.Namespace, store: PuzzleStore) -> int:
    if args.size % 2 != 0:
        print("Warning: program only generates valid puzzle bases of an even size.")
    config = GeneratorConfig(size=args.size, seed=args.seed, max_attempts=args.max_attempts)
    try:
        grid = BlockPatternGenerator(config).generate()
    except GenerationError as exc:
        print(f"Unable to generate puzzle: {exc}")
        return EXIT_FAILURE
    print(format_grid(grid))
    store.save(args.name, grid)
    result = GridValidator().validate_base(grid)
    if not result.ok:
        print(f"Warning: generated base is invalid: {result.error}")
    return EXIT_OK


def cmd_display(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = store.load(args.name)
    if args.coords:
        pretty_print_grid(grid, label=args.name)
    else:
        print(format_grid(grid))
    return EXIT_OK


def cmd_stats(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = store.load(args.name)
    dictionary = load_dictionary(args) if args.words else None
    print_grid_stats(grid, dictionary)
    return EXIT_OK


def cmd_check_base(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = store.load(args.name)
    rules = ValidationRules(max_block_percent=args.max_block_percent)
    result = GridValidator(rules).validate_base(grid)
    if result.ok:
        print("Puzzle base is valid")
        return EXIT_OK
    print(f"Puzzle base is invalid: {result.error}")
    return EXIT_FAILURE


def cmd_check_words(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = store.load(args.name)
    dictionary = load_dictionary(args)
    rules = ValidationRules(forbid_repeats=args.no_repeats)
    result = GridValidator(rules).validate_words(grid, dictionary)
    if result.ok:
        print("Puzzle words are valid")
        return EXIT_OK
    print(f"Puzzle words are invalid: {result.error}")
    for message in result.messages[1:]:
        print(f"  {message}")
    return EXIT_FAILURE


def cmd_suggest(args: argparse.Namespace, store: PuzzleStore) -> int:
    try:
        direction = Direction.parse(args.direction)
    except ValueError as exc:
        print(exc)
        return EXIT_FAILURE
    if args.limit is not None and args.limit < 0:
        print("The suggestion count must not be negative")
        return EXIT_FAILURE
    grid = store.load(args.name)
    dictionary = load_dictionary(args)
    try:
        suggestions = SuggestionEngine(dictionary).suggest(grid, args.index, direction, args.limit)
    except NoSlotAtIndex as exc:
        print(exc)
        return EXIT_FAILURE
    print(suggestions)
    return EXIT_OK


def cmd_random_fill(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = random_fill(store.load(args.name), random.Random(args.seed))
    print(format_grid(grid))
    store.save(args.name, grid)
    return EXIT_OK


def cmd_fill(args: argparse.Namespace, store: PuzzleStore) -> int:
    grid = store.load(args.name)
    dictionary = load_dictionary(args)
    config = SolverConfig(timeout_seconds=args.timeout, allow_repeats=args.allow_repeats)
    try:
        filled = fill_grid(grid, dictionary, config)
    except FillError as exc:
        print(f"Unable to fill puzzle: {exc}")
        return EXIT_FAILURE
    print(format_grid(filled))
    store.save(args.name, filled)
    return EXIT_OK


COMMANDS: Dict[str, Callable[[argparse.Namespace, PuzzleStore], int]] = {
    "new": cmd_new,
    "display": cmd_display,
    "stats": cmd_stats,
    "check-base": cmd_check_base,
    "check-words": cmd_check_words,
    "suggest": cmd_suggest,
    "random-fill": cmd_random_fill,
    "fill": cmd_fill,
}


def load_dictionary(args: argparse.Namespace) -> WordDictionary:
    return WordDictionary.from_file(DictionaryConfig(path=args.dictionary))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        store = PuzzleStore(args.puzzle_dir)
        return COMMANDS[args.command](args, store)
    except ResourceError as exc:
        print(exc)
        return EXIT_FAILURE
    except CrosswordError as exc:
        LOGGER.error("Command %s failed: %s", args.command, exc)
        print(exc)
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

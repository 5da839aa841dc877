"""Construction and validation of NYT-style crossword grids.

This package exposes the public API surface via:

- ``crossgrid.engine.grid.CrosswordGrid``: the cell matrix and its structural queries.
- ``crossgrid.engine.validator``: base (block pattern) and word validation.
- ``crossgrid.engine.suggest.SuggestionEngine``: dictionary words for a slot.
- ``crossgrid.engine.generator.BlockPatternGenerator``: random symmetric block layouts.
- ``crossgrid.data.dictionary.WordDictionary``: the word list and pattern lookup.
"""

from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.extractor import extract_slots
from .engine.generator import BlockPatternGenerator, GeneratorConfig
from .engine.grid import CrosswordGrid
from .engine.suggest import SuggestionEngine
from .engine.validator import GridValidator, ValidationRules, validate_base, validate_words

__all__ = [
    "BlockPatternGenerator",
    "CrosswordGrid",
    "DictionaryConfig",
    "GeneratorConfig",
    "GridValidator",
    "SuggestionEngine",
    "ValidationRules",
    "WordDictionary",
    "extract_slots",
    "validate_base",
    "validate_words",
]

__version__ = "0.1.0"

"""Dictionary suggestions for a partially filled slot."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import Direction
from ..data.dictionary import WordDictionary
from .extractor import get_slot
from .grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class SuggestionEngine:
    """Finds dictionary words that fit a slot's fixed letters."""

    def __init__(self, dictionary: WordDictionary) -> None:
        self.dictionary = dictionary

    def suggest(
        self,
        grid: CrosswordGrid,
        index: int,
        direction: Direction,
        limit: Optional[int] = None,
    ) -> List[str]:
        """Return matching words in dictionary order, at most ``limit`` of them.

        Raises :class:`~crossgrid.core.exceptions.NoSlotAtIndex` when the
        direction has no slot ``index``. An empty list means nothing fits.
        """

        slot = get_slot(grid.snapshot(), index, direction)
        matches = self.dictionary.find_candidates(slot.length, pattern=slot.pattern(), limit=limit)
        LOGGER.debug(
            "Slot %s %s (%s): %d suggestion(s)",
            direction.label,
            index,
            slot.display_pattern(),
            len(matches),
        )
        return matches


def suggest(
    grid: CrosswordGrid,
    index: int,
    direction: Direction,
    dictionary: WordDictionary,
    limit: Optional[int] = None,
) -> List[str]:
    return SuggestionEngine(dictionary).suggest(grid, index, direction, limit)

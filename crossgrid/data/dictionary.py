"""Word list loading and pattern lookup."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import MAX_WORD_LENGTH
from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

Pattern = Sequence[Optional[str]]


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    path: Path | str
    min_length: int = 1
    max_length: int = MAX_WORD_LENGTH
    encoding: str = "utf-8"


class WordDictionary:
    """An immutable set of lowercase words with a positional index.

    Words keep the order in which they were first supplied (file order when
    loaded from disk), and every query returns matches in that order.
    """

    def __init__(
        self,
        words: Iterable[str],
        min_length: int = 1,
        max_length: int = MAX_WORD_LENGTH,
    ) -> None:
        by_length: Dict[int, List[str]] = defaultdict(list)
        seen: Set[str] = set()
        ordered: List[str] = []
        skipped = 0
        for raw in words:
            word = clean_word(raw)
            if not word or not min_length <= len(word) <= max_length:
                skipped += 1
                continue
            if word in seen:
                continue
            seen.add(word)
            ordered.append(word)
            by_length[len(word)].append(word)

        self._ordered: Tuple[str, ...] = tuple(ordered)
        self._words: FrozenSet[str] = frozenset(seen)
        self._words_by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(entries) for length, entries in by_length.items()
        }
        # Positional index: length -> (position, letter) -> surfaces
        position_index: Dict[int, Dict[Tuple[int, str], Set[str]]] = defaultdict(
            lambda: defaultdict(set)
        )
        for length, entries in self._words_by_length.items():
            length_index = position_index[length]
            for word in entries:
                for pos, char in enumerate(word):
                    length_index[(pos, char)].add(word)
        self._position_index: Dict[int, Dict[Tuple[int, str], FrozenSet[str]]] = {
            length: {key: frozenset(value) for key, value in index.items()}
            for length, index in position_index.items()
        }
        if skipped:
            LOGGER.debug("Skipped %d non-alphabetic or out-of-range entries", skipped)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_file(cls, config: DictionaryConfig) -> "WordDictionary":
        source = Path(config.path)
        LOGGER.info("Loading dictionary from %s", source)
        try:
            with source.open("r", encoding=config.encoding) as handle:
                dictionary = cls(
                    (line for line in handle),
                    min_length=config.min_length,
                    max_length=config.max_length,
                )
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Unable to read dictionary '{source}': {exc}") from exc
        LOGGER.info("Loaded %d words", len(dictionary))
        return dictionary

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def contains(self, word: str) -> bool:
        return clean_word(word) in self._words

    def lengths(self) -> List[int]:
        return sorted(self._words_by_length)

    def find_candidates(
        self,
        length: int,
        pattern: Optional[Pattern] = None,
        limit: Optional[int] = None,
        banned: Optional[Set[str]] = None,
    ) -> List[str]:
        """Return words of ``length`` agreeing with every fixed letter of ``pattern``.

        ``pattern`` holds one entry per position: a letter (any case) or
        ``None`` for a wildcard. Results follow dictionary order and are
        truncated to ``limit`` when it is given.
        """

        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        if pattern is not None and len(pattern) != length:
            raise ValueError(f"Pattern has {len(pattern)} positions, expected {length}")

        matching = self._index_lookup(length, pattern)
        results: List[str] = []
        if limit == 0 or not matching:
            return results
        for word in self._words_by_length.get(length, ()):
            if word not in matching:
                continue
            if banned and word in banned:
                continue
            results.append(word)
            if limit is not None and len(results) >= limit:
                break
        return results

    def _index_lookup(self, length: int, pattern: Optional[Pattern]) -> FrozenSet[str]:
        """Use the positional index to find matching words via set intersection."""

        length_index = self._position_index.get(length)
        if not length_index:
            return frozenset()

        constraints: List[FrozenSet[str]] = []
        if pattern:
            for pos, letter in enumerate(pattern):
                if letter is None:
                    continue
                match_set = length_index.get((pos, letter.lower()))
                if match_set is None:
                    return frozenset()
                constraints.append(match_set)

        if not constraints:
            return frozenset(self._words_by_length.get(length, ()))

        # Intersect smallest sets first
        constraints.sort(key=len)
        result = set(constraints[0])
        for other in constraints[1:]:
            result &= other
            if not result:
                break
        return frozenset(result)


def load_dictionary(path: Path | str) -> WordDictionary:
    """Load a newline-delimited word list with default filtering."""

    return WordDictionary.from_file(DictionaryConfig(path=path))

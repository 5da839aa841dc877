"""Shared helpers for word normalization."""

from __future__ import annotations

import re

WORD_RE = re.compile(r"^[a-z]+$")


def clean_word(text: str) -> str:
    """Return the lowercase form of ``text``, or ``""`` if it is not purely alphabetic."""

    if not text:
        return ""
    word = text.strip().lower()
    if not WORD_RE.match(word):
        return ""
    return word


__all__ = ["clean_word", "WORD_RE"]

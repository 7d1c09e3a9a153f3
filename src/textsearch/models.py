# src/textsearch/models.py
"""
Data models for the text searcher.

- Token: one fragment of the document (word or separator), verbatim.
- OccurrenceKey: (normalized word, ordinal) address of one occurrence.
- ContextHit: the result item returned by Engine.hits().

These classes carry no business logic; tokenizing, linking and indexing live in
their own modules.
"""

from __future__ import annotations
from dataclasses import dataclass


def normalize(text: str) -> str:
    """Matching form of a token or query: lowercased and trimmed."""
    return text.lower().strip()


@dataclass(frozen=True, slots=True)
class Token:
    """
    One tokenizer step.

    Attributes
    ----------
    original : str
        The exact matched substring, including any trailing whitespace the word
        pattern swallowed.
    normalized : str
        normalize(original); used for matching only, never for display.
    is_word : bool
        True when `original` satisfies the word pattern in full.
    """
    original: str
    normalized: str
    is_word: bool

    @classmethod
    def of(cls, original: str, is_word: bool) -> "Token":
        return cls(original=original, normalized=normalize(original), is_word=is_word)


@dataclass(frozen=True, slots=True)
class OccurrenceKey:
    word: str       # normalized text
    ordinal: int    # 0-based rank among occurrences of `word`

    def __post_init__(self) -> None:
        if self.ordinal < 0:
            raise ValueError(f"ordinal must be >= 0, got {self.ordinal}")


@dataclass(frozen=True, slots=True)
class ContextHit:
    """
    One search result.

    Attributes
    ----------
    context : str
        The occurrence with its surrounding words, trimmed.
    position : int
        Position of the matched token in the token sequence.
    ordinal : int
        Rank of this occurrence among all occurrences of the query word.
    """
    context: str
    position: int
    ordinal: int

from __future__ import annotations
import re
from typing import Iterator

from .config import WORD_PATTERN
from .models import Token


def _compile(pattern: str | re.Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid word pattern {pattern!r}: {exc}") from exc


class TextTokenizer:
    """
    Split text into consecutive fragments: matches of the word pattern and the
    gaps between them. Nothing is dropped, so joining every fragment gives the
    input back unchanged.

    Iterating the tokenizer is lazy and restarts from the beginning each time:

        >>> list(TextTokenizer("123, 789: def", "[0-9]+"))
        ['123', ', ', '789', ': def']
    """

    def __init__(self, text: str, pattern: str | re.Pattern = WORD_PATTERN) -> None:
        if text is None:
            raise ValueError("text must not be None")
        self.text = text
        self.pattern = _compile(pattern)

    def __iter__(self) -> Iterator[str]:
        text = self.text
        pos = 0
        for m in self.pattern.finditer(text):
            start, end = m.span()
            if start == end:
                continue  # zero-width match, leave it to the gap
            if start > pos:
                yield text[pos:start]
            yield text[start:end]
            pos = end
        if pos < len(text):
            yield text[pos:]

    def is_word(self, candidate: str) -> bool:
        """True if `candidate`, on its own, matches the word pattern in full."""
        return self.pattern.fullmatch(candidate) is not None

    def tokens(self) -> Iterator[Token]:
        """Lazily yield classified Token records in document order."""
        for fragment in self:
            yield Token.of(fragment, self.is_word(fragment))

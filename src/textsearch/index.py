from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Optional, Set

from .models import OccurrenceKey, normalize
from .sequence import Node, TokenSequence


class OccurrenceIndex:
    """
    Normalized word -> every position where it occurs, in document order.

    An occurrence is addressed by OccurrenceKey(word, ordinal); ordinals for a
    word run 0, 1, 2, ... without gaps, in the order nodes were registered.
    Postings are per-word lists of positions into the bound TokenSequence; the
    index never holds nodes itself.
    """

    def __init__(self, sequence: TokenSequence) -> None:
        self._sequence = sequence
        self._postings: Dict[str, List[int]] = defaultdict(list)
        self._registered: Set[int] = set()
        self._frozen = False

    # ---- Build ----
    def register(self, node: Node) -> OccurrenceKey:
        if node is None:
            raise ValueError("node cannot be None")
        if self._frozen:
            raise RuntimeError("OccurrenceIndex is frozen; no further nodes can be registered")
        if not self._sequence.owns(node):
            raise ValueError(f"node at position {node.position} does not belong to this sequence")
        if node.position in self._registered:
            raise ValueError(f"node at position {node.position} is already registered")

        word = node.token.normalized
        positions = self._postings[word]
        key = OccurrenceKey(word, len(positions))
        positions.append(node.position)
        self._registered.add(node.position)
        return key

    def freeze(self) -> None:
        self._postings = dict(self._postings)  # lookups of unknown words must not insert
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---- Query ----
    def lookup(self, word: str) -> List[Node]:
        """All nodes whose normalized text equals normalize(word), in document order."""
        key = normalize(word)
        if not key:
            return []
        return [self._sequence.node(pos) for pos in self._postings.get(key, ())]

    def get(self, key: OccurrenceKey) -> Optional[Node]:
        if not key.word:
            return None
        positions = self._postings.get(key.word, ())
        if key.ordinal < len(positions):
            return self._sequence.node(positions[key.ordinal])
        return None

    def count(self, word: str) -> int:
        key = normalize(word)
        if not key:
            return 0
        return len(self._postings.get(key, ()))

    def vocabulary(self) -> List[str]:
        """Distinct normalized texts, in first-seen order."""
        return list(self._postings)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.count(word) > 0

    def __len__(self) -> int:
        return len(self._postings)

# textsearch/engine.py
from __future__ import annotations

import os
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from . import config as CFG
from .context import extract_contexts
from .index import OccurrenceIndex
from .loader import read_document
from .models import ContextHit
from .sequence import TokenSequence
from .tokenizer import TextTokenizer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexedDocument:
    """The token sequence and its occurrence index, built together and frozen."""
    sequence: TokenSequence
    index: OccurrenceIndex


def build_document(text: str, pattern: str | re.Pattern = CFG.WORD_PATTERN) -> IndexedDocument:
    """
    Tokenize `text` and index every token in a single pass.
    Each token is appended to the sequence and registered right away, so
    ordinals follow document order.
    """
    tokenizer = TextTokenizer(text, pattern)
    sequence = TokenSequence()
    index = OccurrenceIndex(sequence)
    for token in tokenizer.tokens():
        index.register(sequence.append(token))
    sequence.freeze()
    index.freeze()
    return IndexedDocument(sequence=sequence, index=index)


class Engine:
    """
    Facade over tokenizer -> sequence -> index -> context extractor.

    Public API (used by CLI/Flask):
      * build(text):           index a document held in memory
      * build_from_file(path): read a file, then build(...)
      * search(word, n):       one context string per occurrence, document order
      * hits(word, n):         same, as ContextHit rows with positions
      * shutdown():            drop the document

    An engine indexes exactly one document. Once built it is read-only, so any
    number of searches (from any number of threads) can run against it.
    """

    # ------------- lifecycle -------------

    def __init__(self, pattern: str | re.Pattern = CFG.WORD_PATTERN) -> None:
        self.pattern = pattern
        self._doc: Optional[IndexedDocument] = None
        self._closed = False

    @classmethod
    def from_file(cls, path: str | os.PathLike, *,
                  pattern: str | re.Pattern = CFG.WORD_PATTERN,
                  encoding: Optional[str] = None) -> "Engine":
        eng = cls(pattern=pattern)
        eng.build_from_file(path, encoding=encoding)
        return eng

    # /* ~~~ Index a document; allowed once per engine ~~~ */
    def build(self, text: str) -> None:
        self._check_buildable()
        if text is None:
            raise ValueError("build(): text must not be None")

        log.info("Indexing document (%d chars)", len(text))
        doc = build_document(text, self.pattern)

        # Commit engine state only after the whole pass succeeded
        self._doc = doc
        log.info("Engine build() complete: tokens=%d terms=%d",
                 len(doc.sequence), len(doc.index))

    def build_from_file(self, path: str | os.PathLike, *, encoding: Optional[str] = None) -> None:
        self._check_buildable()
        log.info("Loading document from %s", path)
        self.build(read_document(path, encoding=encoding))

    @property
    def built(self) -> bool:
        return self._doc is not None

    # ------------- query -------------

    def search(self, query_word: str, context_words: int) -> List[str]:
        return [h.context for h in self.hits(query_word, context_words)]

    def hits(self, query_word: str, context_words: int) -> List[ContextHit]:
        doc = self._require_doc()
        if query_word is None:
            raise ValueError("query word must not be None")

        nodes = doc.index.lookup(query_word)
        contexts = extract_contexts(doc.sequence, nodes, context_words)
        log.debug("search(%r, %d): %d occurrence(s)", query_word, context_words, len(nodes))
        return [
            ContextHit(context=text, position=node.position, ordinal=ordinal)
            for ordinal, (node, text) in enumerate(zip(nodes, contexts))
        ]

    def count(self, query_word: str) -> int:
        return self._require_doc().index.count(query_word)

    def stats(self) -> Dict[str, int]:
        doc = self._require_doc()
        words = sum(1 for n in doc.sequence if n.token.is_word)
        return {"tokens": len(doc.sequence), "words": words, "terms": len(doc.index)}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._doc = None
        self._closed = True
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _check_buildable(self) -> None:
        if self._closed:
            raise RuntimeError("Engine has been shut down; create a new Engine")
        if self._doc is not None:
            raise RuntimeError("Engine already built; create a new Engine for another document")

    def _require_doc(self) -> IndexedDocument:
        if self._doc is None:
            raise RuntimeError("Engine not initialized. Call build() or build_from_file() first.")
        return self._doc

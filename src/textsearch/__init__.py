"""
Text searcher: index one document, then look up every occurrence of a word
with N words of context on each side.

    from textsearch import Engine

    eng = Engine.from_file("origin_of_species.txt")
    eng.search("naturalists", 3)
    # ['great majority of naturalists believed that species', ...]

The document is tokenized once into a linked token sequence plus an
occurrence index; searches never modify either.
"""

# src/textsearch/__init__.py
from .engine import Engine, IndexedDocument, build_document  # re-export
from .loader import read_document
from .models import ContextHit, OccurrenceKey, Token
from .tokenizer import TextTokenizer

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "IndexedDocument",
    "build_document",
    "read_document",
    "ContextHit",
    "OccurrenceKey",
    "Token",
    "TextTokenizer",
]

# src/e2e/test_sequence_and_index.py

import pytest

from textsearch.engine import build_document
from textsearch.index import OccurrenceIndex
from textsearch.models import OccurrenceKey, Token
from textsearch.sequence import TokenSequence


def _chain(*pieces: tuple[str, bool]) -> TokenSequence:
    seq = TokenSequence()
    for text, is_word in pieces:
        seq.append(Token.of(text, is_word))
    return seq


def test_links_visit_every_node_both_ways():
    seq = _chain(("Hello", True), (", ", False), ("great ", True), ("world", True))
    assert [n.token.original for n in seq] == ["Hello", ", ", "great ", "world"]
    assert [n.token.original for n in reversed(seq)] == ["world", "great ", ", ", "Hello"]
    assert seq.first.prev is None
    assert seq.last.next is None
    assert seq.next_of(seq.first) is seq.node(1)
    assert seq.prev_of(seq.node(1)) is seq.first
    assert seq.text() == "Hello, great world"


def test_walks_exclude_the_start_node():
    seq = _chain(("a ", True), ("b ", True), ("c", True))
    mid = seq.node(1)
    assert [n.position for n in seq.walk_backward(mid)] == [0]
    assert [n.position for n in seq.walk_forward(mid)] == [2]


def test_empty_sequence():
    seq = TokenSequence()
    assert seq.first is None and seq.last is None
    assert list(seq) == [] and len(seq) == 0
    with pytest.raises(IndexError):
        seq.node(0)


def test_frozen_sequence_rejects_append():
    seq = _chain(("a", True))
    seq.freeze()
    with pytest.raises(RuntimeError):
        seq.append(Token.of("b", True))


def test_ordinals_follow_document_order():
    seq = _chain(("Hello ", True), ("there ", True), ("HELLO", True), (", ", False), ("hello", True))
    idx = OccurrenceIndex(seq)
    keys = [idx.register(n) for n in seq]
    assert keys[0] == OccurrenceKey("hello", 0)
    assert keys[2] == OccurrenceKey("hello", 1)
    assert keys[4] == OccurrenceKey("hello", 2)
    assert [n.position for n in idx.lookup("hello")] == [0, 2, 4]
    assert idx.get(OccurrenceKey("hello", 2)).position == 4
    assert idx.get(OccurrenceKey("hello", 3)) is None
    assert idx.count("Hello") == 3


def test_lookup_is_case_insensitive_and_trimmed():
    doc = build_document("Species and species and SPECIES")
    for q in ("species", "SPECIES", "SpEcIeS", "  species  "):
        assert [n.position for n in doc.index.lookup(q)] == [0, 2, 4]


def test_unknown_word_and_blank_query_give_empty_list():
    doc = build_document("one two three")
    assert doc.index.lookup("four") == []
    assert doc.index.lookup("   ") == []
    assert "four" not in doc.index
    assert "two" in doc.index


def test_register_rejects_none_and_duplicates():
    seq = _chain(("hello", True))
    idx = OccurrenceIndex(seq)
    with pytest.raises(ValueError):
        idx.register(None)
    idx.register(seq.first)
    with pytest.raises(ValueError):
        idx.register(seq.first)


def test_register_rejects_foreign_node():
    seq = _chain(("hello", True))
    other = _chain(("hello", True))
    idx = OccurrenceIndex(seq)
    with pytest.raises(ValueError):
        idx.register(other.first)


def test_built_document_is_frozen():
    doc = build_document("one two")
    assert doc.sequence.frozen and doc.index.frozen
    with pytest.raises(RuntimeError):
        doc.index.register(doc.sequence.first)
    # lookups of unknown words must not grow the index
    doc.index.lookup("zzz")
    doc.index.count("zzz")
    assert doc.index.vocabulary() == ["one", "two"]
    assert len(doc.index) == 2


def test_separators_are_indexed_too():
    doc = build_document("a, b, c")
    assert [n.token.original for n in doc.index.lookup(",")] == [", ", ", "]


def test_negative_ordinal_is_invalid():
    with pytest.raises(ValueError):
        OccurrenceKey("word", -1)


def test_blank_query_counts_agree_with_lookup():
    doc = build_document("  alpha  \t beta")
    for q in ("", "  ", "\t"):
        assert doc.index.count(q) == 0 == len(doc.index.lookup(q))
        assert q not in doc.index
    assert doc.index.get(OccurrenceKey("", 0)) is None
    assert doc.index.count("alpha") == 1

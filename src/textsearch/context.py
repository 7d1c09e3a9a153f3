from __future__ import annotations
from typing import Iterable, List, Sequence

from .sequence import Node, TokenSequence


def check_width(width: int) -> int:
    # bool is an int subclass; True/False as a width is a caller bug
    if width is None or isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"context width must be a non-negative int, got {width!r}")
    if width < 0:
        raise ValueError(f"context width must be >= 0, got {width}")
    return width


def _take_words(nodes: Iterable[Node], width: int) -> List[str]:
    """
    Collect original texts until `width` word tokens have been taken.
    Separators pass through without spending budget. Collection stops right
    after the word that spends the budget.
    """
    parts: List[str] = []
    taken = 0
    if width == 0:
        return parts
    for node in nodes:
        parts.append(node.token.original)
        if node.token.is_word:
            taken += 1
            if taken >= width:
                break
    return parts


def _before(sequence: TokenSequence, node: Node, width: int) -> str:
    parts = _take_words(sequence.walk_backward(node), width)
    parts.reverse()
    return "".join(parts)


def _after(sequence: TokenSequence, node: Node, width: int) -> str:
    return "".join(_take_words(sequence.walk_forward(node), width))


def _window(sequence: TokenSequence, node: Node, width: int) -> str:
    return (_before(sequence, node, width) + node.token.original + _after(sequence, node, width)).strip()


def context_before(sequence: TokenSequence, node: Node, width: int) -> str:
    return _before(sequence, node, check_width(width))


def context_after(sequence: TokenSequence, node: Node, width: int) -> str:
    return _after(sequence, node, check_width(width))


def extract_context(sequence: TokenSequence, node: Node, width: int) -> str:
    """
    The occurrence at `node` with up to `width` words on each side, trimmed.

    Only word tokens count toward `width`; punctuation and whitespace between
    them is kept verbatim. Near either end of the document the window is
    simply shorter.
    """
    return _window(sequence, node, check_width(width))


def extract_contexts(sequence: TokenSequence, nodes: Sequence[Node], width: int) -> List[str]:
    """extract_context() for each node, with `width` checked once up front."""
    width = check_width(width)
    return [_window(sequence, node, width) for node in nodes]

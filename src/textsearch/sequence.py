from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .models import Token


@dataclass(slots=True)
class Node:
    """
    One token in the sequence. `prev`/`next` are positions of the neighbours
    (None at either end), not references; the sequence owns every node.
    """
    token: Token
    position: int
    prev: Optional[int] = None
    next: Optional[int] = None


class TokenSequence:
    """
    Doubly-linked chain of tokens in document order, stored as an arena
    (a list of nodes addressed by position).

    Nodes are appended once while the document is read and never unlinked.
    After freeze() the sequence is read-only.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._frozen = False

    # ---- Build ----
    def append(self, token: Token) -> Node:
        if self._frozen:
            raise RuntimeError("TokenSequence is frozen; no further tokens can be appended")
        node = Node(token=token, position=len(self._nodes))
        if self._nodes:
            tail = self._nodes[-1]
            tail.next = node.position
            node.prev = tail.position
        self._nodes.append(node)
        return node

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---- Access ----
    @property
    def first(self) -> Optional[Node]:
        return self._nodes[0] if self._nodes else None

    @property
    def last(self) -> Optional[Node]:
        return self._nodes[-1] if self._nodes else None

    def node(self, position: int) -> Node:
        if not 0 <= position < len(self._nodes):
            raise IndexError(f"no node at position {position}")
        return self._nodes[position]

    def owns(self, node: Node) -> bool:
        return 0 <= node.position < len(self._nodes) and self._nodes[node.position] is node

    def prev_of(self, node: Node) -> Optional[Node]:
        return None if node.prev is None else self._nodes[node.prev]

    def next_of(self, node: Node) -> Optional[Node]:
        return None if node.next is None else self._nodes[node.next]

    # ---- Traversal ----
    def walk_forward(self, node: Node) -> Iterator[Node]:
        """Nodes after `node`, nearest first."""
        cur = self.next_of(node)
        while cur is not None:
            yield cur
            cur = self.next_of(cur)

    def walk_backward(self, node: Node) -> Iterator[Node]:
        """Nodes before `node`, nearest first."""
        cur = self.prev_of(node)
        while cur is not None:
            yield cur
            cur = self.prev_of(cur)

    def __iter__(self) -> Iterator[Node]:
        cur = self.first
        while cur is not None:
            yield cur
            cur = self.next_of(cur)

    def __reversed__(self) -> Iterator[Node]:
        cur = self.last
        while cur is not None:
            yield cur
            cur = self.prev_of(cur)

    def __len__(self) -> int:
        return len(self._nodes)

    def text(self) -> str:
        """The document as it was read."""
        return "".join(n.token.original for n in self._nodes)

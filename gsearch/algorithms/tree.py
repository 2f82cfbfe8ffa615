"""Append-only search tree with parent back-references.

Each discovered state is stored once together with the index of the node
that produced it. A path is rebuilt only when it is needed, by walking the
parent links from a terminal node back to the root. This keeps the per-edge
cost of a search at O(1) instead of copying a growing path prefix into every
frontier entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional

from gsearch.types.base import NodeIndex, S


@dataclass(frozen=True)
class SearchTreeNode(Generic[S]):
    """One discovered state.

    Attributes:
        state: The state value supplied by the domain adapter.
        index: Dense identifier assigned in discovery order; the root is 0.
        parent: Index of the node whose expansion produced this one, or
            ``None`` for the root.
    """

    state: S
    index: NodeIndex
    parent: Optional[NodeIndex] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None


class SearchTree(Generic[S]):
    """Ordered collection of ``SearchTreeNode`` indexed by discovery order.

    Invariants:
        - Node indices are dense and equal to their list position.
        - Only node 0 has ``parent is None``.
        - Every other node has ``parent < index``.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: List[SearchTreeNode[S]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: NodeIndex) -> SearchTreeNode[S]:
        return self._nodes[index]

    def __iter__(self) -> Iterator[SearchTreeNode[S]]:
        return iter(self._nodes)

    def add_root(self, state: S) -> NodeIndex:
        """Insert the start state as node 0.

        Raises:
            ValueError: If the tree already has a root.
        """
        if self._nodes:
            raise ValueError("Search tree already has a root node.")
        self._nodes.append(SearchTreeNode(state, 0, None))
        return 0

    def add(self, state: S, parent: NodeIndex) -> NodeIndex:
        """Append a state discovered by expanding ``parent``.

        Args:
            state: Successor state.
            parent: Index of the expanded node.

        Returns:
            Index of the new node.

        Raises:
            ValueError: If the tree is empty or ``parent`` is not a known index.
        """
        index = len(self._nodes)
        if not 0 <= parent < index:
            raise ValueError(
                f"Parent index {parent} is out of range for a tree of {index} nodes."
            )
        self._nodes.append(SearchTreeNode(state, index, parent))
        return index

    def depth(self, index: NodeIndex) -> int:
        """Return the number of edges between node ``index`` and the root."""
        node = self._nodes[index]
        depth = 0
        while node.parent is not None:
            node = self._nodes[node.parent]
            depth += 1
        return depth

    def path_to(self, index: NodeIndex) -> List[S]:
        """Return the states from the root to node ``index``, both inclusive.

        Raises:
            IndexError: If ``index`` does not name a node in the tree.
        """
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"Node index {index} is not in the search tree.")

        reversed_states: List[S] = []
        node = self._nodes[index]
        while True:
            reversed_states.append(node.state)
            if node.parent is None:
                break
            node = self._nodes[node.parent]
        reversed_states.reverse()
        return reversed_states

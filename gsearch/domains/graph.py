"""NetworkX graph state space.

States are graph nodes and one step follows one edge. Any NetworkX graph
class works; for directed graphs only outgoing edges are followed.

Example:
    >>> import networkx as nx
    >>> from gsearch import breadth_first_search
    >>> from gsearch.domains.graph import GraphDomain
    >>>
    >>> G = nx.DiGraph([("A", "B"), ("B", "C"), ("A", "C")])
    >>> domain = GraphDomain(G, goals=["C"])
    >>> breadth_first_search(domain, "A", GraphDomain.is_goal, GraphDomain.expand)
    ['A', 'C']
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Tuple, Union

import networkx as nx

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


class GraphDomain:
    """Graph plus a set of goal nodes.

    Attributes:
        graph: The wrapped NetworkX graph. It is never modified.
        goals: Goal nodes.
    """

    __slots__ = ("graph", "goals")

    def __init__(self, graph: NxGraph, goals: Iterable[Hashable]) -> None:
        self.graph = graph
        self.goals = frozenset(goals)
        for goal in self.goals:
            self.check_node(goal)

    def __repr__(self) -> str:
        return (
            f"GraphDomain(nodes={self.graph.number_of_nodes()}, "
            f"edges={self.graph.number_of_edges()}, goals={len(self.goals)})"
        )

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        goals: Iterable[Hashable],
        *,
        directed: bool = True,
        nodes: Iterable[Hashable] = (),
    ) -> "GraphDomain":
        """Build a domain from an edge list.

        Args:
            edges: ``(u, v)`` pairs, added in order.
            goals: Goal nodes; each must appear in ``edges`` or ``nodes``.
            directed: Build a ``DiGraph`` when true, a ``Graph`` otherwise.
            nodes: Extra (possibly isolated) nodes added before the edges.
        """
        graph: Any = nx.DiGraph() if directed else nx.Graph()
        graph.add_nodes_from(nodes)
        graph.add_edges_from(edges)
        return cls(graph, goals)

    def check_node(self, node: Hashable) -> None:
        """Raise ``KeyError`` if ``node`` is not in the graph."""
        if node not in self.graph:
            raise KeyError(f"Node '{node}' is not in the graph.")

    def is_goal(self, node: Hashable) -> bool:
        return node in self.goals

    def expand(self, node: Hashable) -> List[Hashable]:
        return list(self.graph.neighbors(node))

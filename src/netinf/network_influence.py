# src/netinf/network_influence.py

"""
Name-level query surface over a crawled link graph.

Wraps a DirectedGraph and translates vertex names to ids (and back) for
the traversal, scoring and selection routines. Every method is read-only.
"""

from typing import Iterable, List, Union

from netinf.graphs.graph import DirectedGraph
from netinf.graphs.io import read_graph
from netinf.influence.scoring import influence, influence_of_set
from netinf.selection.greedy import degree_greedy, modular_greedy, submodular_greedy
from netinf.traversal import bfs as traversal

NameOrNames = Union[str, Iterable[str]]


class NetworkInfluence:
    """
    Reachability and influence statistics for one graph.

    Args:
        graph: the graph to query. Use `from_file` to load one from disk.
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph

    @classmethod
    def from_file(cls, graph_data: str, fmt: str = "edge_list") -> "NetworkInfluence":
        """
        Args:
            graph_data: path of the edge-list file written by the crawler.
            fmt: input format, "edge_list" or "gpickle".
        """
        return cls(read_graph(graph_data, fmt=fmt))

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    def vertices(self) -> List[str]:
        return self.graph.vertices()

    def has_vertex(self, name: str) -> bool:
        return self.graph.has_vertex(name)

    def _id(self, name: str) -> int:
        return self.graph.index.id_of(name)

    def _ids(self, names: Iterable[str]) -> List[int]:
        return [self._id(name) for name in names]

    def out_degree(self, v: str) -> int:
        return self.graph.out_degree(self._id(v))

    def distance(self, u: NameOrNames, v: str) -> int:
        """
        Hop count from u to v, or from the nearest member of a set u.
        Returns -1 when v cannot be reached.
        """
        end = self._id(v)
        if isinstance(u, str):
            return traversal.distance(self.graph, self._id(u), end)
        return traversal.distance_from_set(self.graph, self._ids(u), end)

    def shortest_path(self, u: str, v: str) -> List[str]:
        """
        A shortest path from u to v as a list of names starting with u and
        ending with v. Empty if there is no path.
        """
        start = self._id(u)
        end = self._id(v)
        path = traversal.shortest_path(self.graph, start, end)
        return [self.graph.index.name_of(x) for x in path]

    def influence(self, u: NameOrNames) -> float:
        """Inf(u) for a single name, or Inf(S) for an iterable of names."""
        if isinstance(u, str):
            return influence(self.graph, self._id(u))
        return influence_of_set(self.graph, self._ids(u))

    def most_influential_degree(self, k: int) -> List[str]:
        return degree_greedy(self.graph, k)

    def most_influential_modular(self, k: int) -> List[str]:
        return modular_greedy(self.graph, k)

    def most_influential_submodular(self, k: int) -> List[str]:
        return submodular_greedy(self.graph, k)

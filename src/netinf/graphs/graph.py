# src/netinf/graphs/graph.py

"""
Vertex index and the immutable directed graph built from it.
"""

from typing import Dict, Iterator, List, Sequence, Tuple

import networkx as nx

from netinf.errors import VertexNotFoundError


class VertexIndex:
    """
    Bidirectional mapping between vertex names and dense integer ids.

    Ids are handed out sequentially from 0 the first time a name is seen
    and are never reused.
    """

    def __init__(self):
        self._name_to_id: Dict[str, int] = {}
        self._id_to_name: List[str] = []

    def ensure_vertex(self, name: str) -> int:
        """Return the id of `name`, allocating the next id if it is new."""
        vid = self._name_to_id.get(name)
        if vid is None:
            vid = len(self._id_to_name)
            self._name_to_id[name] = vid
            self._id_to_name.append(name)
        return vid

    def id_of(self, name: str) -> int:
        try:
            return self._name_to_id[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def name_of(self, vid: int) -> str:
        return self._id_to_name[vid]

    def names(self) -> List[str]:
        """All names, in id order."""
        return list(self._id_to_name)

    def __contains__(self, name: object) -> bool:
        return name in self._name_to_id

    def __len__(self) -> int:
        return len(self._id_to_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._id_to_name)


class DirectedGraph:
    """
    Read-only adjacency-list graph over the ids of a VertexIndex.

    Attributes:
        index: the VertexIndex the graph was built with.
        adjacency: adjacency[u] is the tuple of out-neighbour ids of u,
            in the order the edges were read. Duplicate edges are kept.
    """

    def __init__(self, index: VertexIndex, adjacency: Sequence[Sequence[int]]):
        if len(adjacency) != len(index):
            raise ValueError(
                f"adjacency has {len(adjacency)} rows for {len(index)} vertices"
            )
        n = len(index)
        rows: List[Tuple[int, ...]] = []
        for u, nbrs in enumerate(adjacency):
            row = tuple(nbrs)
            for v in row:
                if not 0 <= v < n:
                    raise ValueError(f"edge {u}->{v} points outside the graph")
            rows.append(row)

        self.index = index
        self.adjacency: Tuple[Tuple[int, ...], ...] = tuple(rows)

    @property
    def vertex_count(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(row) for row in self.adjacency)

    def neighbors(self, u: int) -> Tuple[int, ...]:
        return self.adjacency[u]

    def out_degree(self, u: int) -> int:
        return len(self.adjacency[u])

    def vertices(self) -> List[str]:
        return self.index.names()

    def has_vertex(self, name: str) -> bool:
        return name in self.index

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Export as a networkx MultiDiGraph keyed by vertex name.

        A multigraph is used so that duplicate edges survive the export and
        out-degrees match `out_degree`.
        """
        G = nx.MultiDiGraph()
        G.add_nodes_from(self.index)
        for u, row in enumerate(self.adjacency):
            src = self.index.name_of(u)
            for v in row:
                G.add_edge(src, self.index.name_of(v))
        return G

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

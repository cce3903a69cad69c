# src/netinf/traversal/bfs.py

"""
Breadth-first search over a DirectedGraph.

One routine covers both the single-source and the multi-source case: all
sources start in the queue at distance 0, in the order given, so the
distance of a vertex is its hop count from the nearest source.
"""

from collections import deque
from typing import Iterable, List, Optional

import numpy as np

from netinf.graphs.graph import DirectedGraph

NO_PARENT = -1
UNREACHED = -1


class BFSResult:
    """
    Per-vertex outcome of one BFS run.

    Attributes:
        visited: bool array, True for every discovered vertex (sources included).
        dist: int array of hop counts from the nearest source, -1 if unreached.
        parent: int array of BFS-tree parents, -1 for sources and unreached vertices.
        order: vertex ids in the order they were discovered.
    """

    def __init__(
        self,
        visited: np.ndarray,
        dist: np.ndarray,
        parent: np.ndarray,
        order: List[int],
    ):
        self.visited = visited
        self.dist = dist
        self.parent = parent
        self.order = order

    def distance_to(self, v: int) -> int:
        return int(self.dist[v])

    def path_to(self, v: int) -> List[int]:
        """
        Walk parent pointers back from v. Empty if v was never reached.
        """
        if not self.visited[v]:
            return []
        path = [v]
        cur = int(self.parent[v])
        while cur != NO_PARENT:
            path.append(cur)
            cur = int(self.parent[cur])
        path.reverse()
        return path


def bfs(
    graph: DirectedGraph,
    sources: Iterable[int],
    target: Optional[int] = None,
) -> BFSResult:
    """
    Run BFS from one or more source ids.

    Args:
        graph: graph to traverse.
        sources: start ids; repeated ids are ignored after the first.
        target: if given, stop as soon as this id is dequeued. Vertices
            discovered up to that point keep their distances.

    Returns:
        BFSResult with freshly allocated arrays.
    """
    n = graph.vertex_count
    visited = np.zeros(n, dtype=bool)
    dist = np.full(n, UNREACHED, dtype=np.int64)
    parent = np.full(n, NO_PARENT, dtype=np.int64)
    order: List[int] = []

    queue = deque()
    for s in sources:
        if visited[s]:
            continue
        visited[s] = True
        dist[s] = 0
        queue.append(s)
        order.append(s)

    while queue:
        x = queue.popleft()
        if x == target:
            break
        dx = dist[x] + 1
        for y in graph.neighbors(x):
            if not visited[y]:
                visited[y] = True
                dist[y] = dx
                parent[y] = x
                queue.append(y)
                order.append(y)

    return BFSResult(visited, dist, parent, order)


def distance(graph: DirectedGraph, u: int, v: int) -> int:
    """Hop count from u to v, -1 if v is unreachable."""
    if u == v:
        return 0
    return bfs(graph, [u], target=v).distance_to(v)


def distance_from_set(graph: DirectedGraph, sources: Iterable[int], v: int) -> int:
    """Hop count from the nearest member of `sources` to v, -1 if unreachable."""
    sources = list(sources)
    if v in sources:
        return 0
    return bfs(graph, sources, target=v).distance_to(v)


def shortest_path(graph: DirectedGraph, u: int, v: int) -> List[int]:
    """
    One shortest u -> v path as a list of ids, [] if none exists.

    Ties between equally short paths go to whichever was found first in
    adjacency order.
    """
    if u == v:
        return [u]
    return bfs(graph, [u], target=v).path_to(v)

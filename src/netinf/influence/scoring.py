# src/netinf/influence/scoring.py

"""
Decayed-reachability influence.

    Inf(S) = |S| + sum over v reachable from S, v not in S, of 0.5 ** d(S, v)

with Inf(u) = Inf({u}). The decay factor is carried along the BFS and
halved whenever the discovered distance grows, so every term is an exact
power of two and the sum matches direct exponentiation.
"""

from typing import Iterable

from netinf.graphs.graph import DirectedGraph
from netinf.traversal.bfs import bfs


def influence_of_set(graph: DirectedGraph, sources: Iterable[int]) -> float:
    """
    Inf(S) for a set of vertex ids. Repeated ids count once.

    Args:
        graph: graph to score on.
        sources: ids of the seed set S.

    Returns:
        |S| plus the decayed contribution of every other reachable vertex.
        0.0 for an empty set.
    """
    result = bfs(graph, sources)

    score = 0.0
    decay = 1.0
    level = 0
    for v in result.order:
        d = int(result.dist[v])
        if d == 0:
            score += 1.0
            continue
        while level < d:
            decay *= 0.5
            level += 1
        score += decay
    return score


def influence(graph: DirectedGraph, u: int) -> float:
    """Inf(u): 1.0 for u itself plus 0.5 ** d(u, v) for every reachable v."""
    return influence_of_set(graph, [u])

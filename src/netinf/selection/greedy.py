# src/netinf/selection/greedy.py

"""
Top-k influence maximization heuristics.

- degree:     rank vertices by out-degree.
- modular:    rank vertices by their own Inf(v), computed independently.
- submodular: grow S one vertex at a time, each round adding the v that
              maximizes Inf(S ∪ {v}).

All three return at most k distinct names (fewer when the graph is
smaller), and [] for k <= 0.
"""

import logging
from typing import Callable, List, Set, Tuple

from netinf.graphs.graph import DirectedGraph
from netinf.heap import HeapEntry, MaxHeap
from netinf.influence.scoring import influence, influence_of_set

logger = logging.getLogger(__name__)


def _top_k_by_key(
    graph: DirectedGraph,
    k: int,
    key_fn: Callable[[int], float],
) -> List[str]:
    if k <= 0:
        return []

    heap = MaxHeap.build_from_insertions(
        HeapEntry(graph.index.name_of(v), float(key_fn(v)))
        for v in range(graph.vertex_count)
    )

    selected: List[str] = []
    while len(selected) < k and len(heap) > 0:
        selected.append(heap.extract_max().name)
    return selected


def degree_greedy(graph: DirectedGraph, k: int) -> List[str]:
    """k vertices with the largest out-degree, highest first."""
    return _top_k_by_key(graph, k, graph.out_degree)


def modular_greedy(graph: DirectedGraph, k: int) -> List[str]:
    """k vertices with the largest individual influence, highest first."""
    return _top_k_by_key(graph, k, lambda v: influence(graph, v))


def submodular_greedy_trace(
    graph: DirectedGraph,
    k: int,
) -> Tuple[List[str], List[float], List[float]]:
    """
    Marginal-gain greedy selection under Inf(.).

    Each round recomputes Inf(S ∪ {v}) from scratch for every v not yet in
    S, since adding one vertex changes the gain of every other candidate.
    Ties go to the candidate with the smallest id.

    Args:
        graph: graph to select from.
        k: number of vertices to select.

    Returns:
        (selected, spreads, marginal_gains)
            selected:       names in the order they were chosen
            spreads:        [Inf(S_1), Inf(S_2), ..., Inf(S_k)]
            marginal_gains: [Inf(S_1) - 0, Inf(S_2) - Inf(S_1), ...]
    """
    selected_ids: List[int] = []
    selected_set: Set[int] = set()
    spreads: List[float] = []
    marginal_gains: List[float] = []

    if k <= 0:
        return [], spreads, marginal_gains

    current = 0.0
    target = min(k, graph.vertex_count)

    while len(selected_ids) < target:
        best_v = -1
        best_score = float("-inf")

        for v in range(graph.vertex_count):
            if v in selected_set:
                continue
            score = influence_of_set(graph, selected_ids + [v])
            if score > best_score:
                best_score = score
                best_v = v

        selected_ids.append(best_v)
        selected_set.add(best_v)
        spreads.append(best_score)
        marginal_gains.append(best_score - current)
        current = best_score

        logger.debug(
            "submodular round %d/%d: chose %s, Inf(S)=%.6f, gain=%.6f",
            len(selected_ids), target, graph.index.name_of(best_v),
            best_score, marginal_gains[-1],
        )

    selected = [graph.index.name_of(v) for v in selected_ids]
    return selected, spreads, marginal_gains


def submodular_greedy(graph: DirectedGraph, k: int) -> List[str]:
    selected, _, _ = submodular_greedy_trace(graph, k)
    return selected


STRATEGIES = {
    "degree": degree_greedy,
    "modular": modular_greedy,
    "submodular": submodular_greedy,
}


def select_most_influential(
    graph: DirectedGraph,
    k: int,
    strategy: str = "submodular",
) -> List[str]:
    try:
        select = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown strategy: {strategy}") from None
    return select(graph, k)

# src/netinf/graphs/io.py

import logging
import os
import pickle
import re
from typing import Iterable, List

import networkx as nx

from netinf.errors import (
    GraphFormatError,
    GraphSizeMismatchError,
    MalformedEdgeLineError,
)
from netinf.graphs.graph import DirectedGraph, VertexIndex

logger = logging.getLogger(__name__)

# Only ASCII whitespace separates names; anything else is part of a name.
ASCII_WHITESPACE = " \t\n\x0b\f\r"
_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")


def parse_edge_list(lines: Iterable[str]) -> DirectedGraph:
    """
    Build a graph from the crawler's edge-list format.

    Format:
        <vertexCount>
        <src> <dst>
        ...

    Every edge line must split into exactly two names separated by ASCII whitespace;
    blank lines count as malformed. The number of distinct names must equal
    the header count.

    Raises:
        GraphFormatError: missing or non-integer header.
        MalformedEdgeLineError: an edge line with other than two tokens.
        GraphSizeMismatchError: distinct names != declared count.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise GraphFormatError("Input is empty; expected a vertex count header") from None

    try:
        declared = int(header.strip())
    except ValueError:
        raise GraphFormatError(f"Invalid vertex count header: {header.rstrip()!r}") from None
    if declared < 0:
        raise GraphFormatError(f"Vertex count must be non-negative, got {declared}")

    index = VertexIndex()
    adjacency: List[List[int]] = []

    for line_number, raw in enumerate(it, start=2):
        line = raw.rstrip("\r\n")
        stripped = line.strip(ASCII_WHITESPACE)
        tokens = _SEPARATOR.split(stripped) if stripped else []
        if len(tokens) != 2:
            raise MalformedEdgeLineError(line_number, line)

        u = index.ensure_vertex(tokens[0])
        if u == len(adjacency):
            adjacency.append([])
        v = index.ensure_vertex(tokens[1])
        if v == len(adjacency):
            adjacency.append([])

        adjacency[u].append(v)

    if len(index) != declared:
        raise GraphSizeMismatchError(declared, len(index))

    return DirectedGraph(index, adjacency)


def from_networkx(G: nx.Graph) -> DirectedGraph:
    """
    Convert a networkx graph into a DirectedGraph.

    Node names are str(node). Isolated nodes are kept. For undirected
    graphs every edge is stored in both directions.

    Raises:
        GraphFormatError: two distinct nodes share the same str() name.
    """
    index = VertexIndex()
    for node in G.nodes():
        name = str(node)
        if name in index:
            raise GraphFormatError(
                f"Node {node!r} collides with another node named {name!r}"
            )
        index.ensure_vertex(name)

    adjacency: List[List[int]] = [[] for _ in range(len(index))]
    directed = G.is_directed()
    for u, v in G.edges():
        uid = index.id_of(str(u))
        vid = index.id_of(str(v))
        adjacency[uid].append(vid)
        if not directed:
            adjacency[vid].append(uid)

    return DirectedGraph(index, adjacency)


def read_graph(path: str, fmt: str = "edge_list") -> DirectedGraph:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")

    if fmt == "edge_list":
        with open(path, "r", encoding="utf-8") as f:
            graph = parse_edge_list(f)

    elif fmt == "gpickle":
        with open(path, "rb") as f:
            G = pickle.load(f)
        if not isinstance(G, nx.Graph):
            raise GraphFormatError("Loaded object is not a NetworkX graph.")
        graph = from_networkx(G)

    else:
        raise ValueError(f"Unsupported graph format: {fmt}")

    logger.debug(
        "Loaded %s from %s: %d vertices, %d edges",
        fmt, path, graph.vertex_count, graph.edge_count,
    )
    return graph


def write_gpickle(graph: DirectedGraph, path: str) -> None:
    """Pickle the graph as a networkx MultiDiGraph, readable with fmt="gpickle"."""
    with open(path, "wb") as f:
        pickle.dump(graph.to_networkx(), f)

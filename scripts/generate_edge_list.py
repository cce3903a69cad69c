# scripts/generate_edge_list.py

"""
Write a random directed graph in the crawler's edge-list format, for
trying out the influence analysis without running a crawl.

The first line is the number of distinct names that appear in the edge
lines, so isolated nodes of the generated graph are dropped.
"""

import argparse
from pathlib import Path

import networkx as nx


def generate_directed_graph(n: int, p: float, seed: int) -> nx.DiGraph:
    return nx.gnp_random_graph(n=n, p=p, seed=seed, directed=True)


def save_edge_list(G: nx.DiGraph, path: Path, prefix: str = "page_") -> int:
    edges = [(f"{prefix}{u}", f"{prefix}{v}") for u, v in G.edges()]
    names = {name for edge in edges for name in edge}
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(names)}\n")
        for u, v in edges:
            f.write(f"{u} {v}\n")
    return len(names)


def main():
    parser = argparse.ArgumentParser(description="Generate a random edge-list graph.")
    parser.add_argument("--n", type=int, default=200, help="Number of nodes.")
    parser.add_argument("--p", type=float, default=0.02, help="Edge probability.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--out", type=str, required=True)
    args = parser.parse_args()

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)

    G = generate_directed_graph(args.n, args.p, args.seed)
    count = save_edge_list(G, out)
    print(f"Wrote {G.number_of_edges()} edges over {count} vertices to {out}")


if __name__ == "__main__":
    main()

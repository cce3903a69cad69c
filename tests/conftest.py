import pytest

from netinf.graphs.io import read_graph
from netinf.network_influence import NetworkInfluence

# A -> B, A -> D, D -> C, C -> A, C -> B, C -> D
SMALL_GRAPH = """4
A B
A D
D C
C A
C B
C D
"""

# Same as SMALL_GRAPH plus Z, which only links out.
WITH_SOURCE_ONLY_VERTEX = SMALL_GRAPH.replace("4\n", "5\n", 1) + "Z A\n"

# H and G reach the same three pages; X reaches a different one.
OVERLAP_GRAPH = """7
H a
H b
H c
G a
G b
G c
X y
"""


@pytest.fixture
def write_graph(tmp_path):
    def _write(text: str, name: str = "graph.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def small_ni(write_graph):
    return NetworkInfluence.from_file(write_graph(SMALL_GRAPH))


@pytest.fixture
def small_graph(write_graph):
    return read_graph(write_graph(SMALL_GRAPH))


@pytest.fixture
def source_only_ni(write_graph):
    return NetworkInfluence.from_file(write_graph(WITH_SOURCE_ONLY_VERTEX))


@pytest.fixture
def overlap_ni(write_graph):
    return NetworkInfluence.from_file(write_graph(OVERLAP_GRAPH))

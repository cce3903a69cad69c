import pytest

from netinf.errors import GraphSizeMismatchError, MalformedEdgeLineError, VertexNotFoundError
from netinf.network_influence import NetworkInfluence


def test_out_degree(small_ni):
    assert small_ni.out_degree("A") == 2
    assert small_ni.out_degree("B") == 0
    assert small_ni.out_degree("C") == 3
    assert small_ni.out_degree("D") == 1


def test_shortest_path_and_distance(small_ni):
    assert small_ni.shortest_path("A", "C") == ["A", "D", "C"]
    assert small_ni.distance("A", "C") == 2
    assert small_ni.shortest_path("C", "B") == ["C", "B"]
    assert small_ni.distance("C", "B") == 1


def test_distance_from_set(small_ni):
    assert small_ni.distance(["A", "D"], "C") == 1
    assert small_ni.distance({"D", "C"}, "A") == 1
    assert small_ni.distance(("A",), "A") == 0
    assert small_ni.distance(["B"], "A") == -1


def test_self_queries(small_ni):
    for v in small_ni.vertices():
        assert small_ni.distance(v, v) == 0
        assert small_ni.shortest_path(v, v) == [v]


def test_path_and_distance_agree(source_only_ni):
    names = source_only_ni.vertices()
    for u in names:
        for v in names:
            path = source_only_ni.shortest_path(u, v)
            d = source_only_ni.distance(u, v)
            if d == -1:
                assert path == []
            else:
                assert len(path) - 1 == d
                assert path[0] == u and path[-1] == v


def test_unreachable_vertex(source_only_ni):
    assert source_only_ni.vertex_count == 5
    assert source_only_ni.distance("A", "Z") == -1
    assert source_only_ni.shortest_path("A", "Z") == []
    assert source_only_ni.distance("Z", "C") == 3


def test_influence(small_ni, overlap_ni):
    assert small_ni.influence("A") == 2.25
    assert small_ni.influence("B") == 1.0
    assert small_ni.influence(["C", "A"]) == 3.0
    assert overlap_ni.influence({"H", "G"}) == 3.5
    assert overlap_ni.influence(["H"]) == overlap_ni.influence("H") == 2.5


def test_most_influential(small_ni, overlap_ni):
    assert small_ni.most_influential_degree(2) == ["C", "A"]
    assert small_ni.most_influential_modular(2) == ["C", "A"]
    assert small_ni.most_influential_submodular(2) == ["C", "A"]
    assert overlap_ni.most_influential_submodular(2) == ["H", "X"]


@pytest.mark.parametrize(
    "call",
    [
        lambda ni: ni.out_degree("nope"),
        lambda ni: ni.distance("A", "nope"),
        lambda ni: ni.distance("nope", "A"),
        lambda ni: ni.distance(["A", "nope"], "B"),
        lambda ni: ni.shortest_path("nope", "A"),
        lambda ni: ni.influence("nope"),
        lambda ni: ni.influence(["A", "nope"]),
    ],
)
def test_unknown_vertex(small_ni, call):
    with pytest.raises(VertexNotFoundError):
        call(small_ni)


def test_construction_fails_fast(write_graph):
    with pytest.raises(GraphSizeMismatchError):
        NetworkInfluence.from_file(write_graph("3\nA B\nC D\n"))
    with pytest.raises(MalformedEdgeLineError):
        NetworkInfluence.from_file(write_graph("2\nA B\nA\n"))


def test_gpickle_input(small_ni, tmp_path):
    from netinf.graphs.io import write_gpickle

    path = tmp_path / "g.gpickle"
    write_gpickle(small_ni.graph, str(path))
    ni = NetworkInfluence.from_file(str(path), fmt="gpickle")
    assert ni.shortest_path("A", "C") == ["A", "D", "C"]
    assert ni.most_influential_submodular(4) == small_ni.most_influential_submodular(4)


def test_wraps_an_existing_graph(small_graph):
    ni = NetworkInfluence(small_graph)
    assert ni.graph is small_graph
    assert ni.out_degree("C") == 3


def test_has_vertex(small_ni):
    assert small_ni.has_vertex("A")
    assert not small_ni.has_vertex("a")
    assert not small_ni.has_vertex("Z")

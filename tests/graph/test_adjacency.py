import pytest

from puzzlegraph.graph.adjacency import AdjacencyGraph, from_neighbors
from puzzlegraph.graph.search import exists_path, shortest_path


@pytest.fixture
def chain():
    g = AdjacencyGraph()
    g.add_edge("A", "B", weight=1.5)
    g.add_edge("B", "C", weight=2.0)
    return g


def test_new_graph_is_directed(chain):
    assert not AdjacencyGraph().undirected
    assert not chain.undirected
    assert not exists_path("C", "A", chain.neighbor_fn())


def test_undirect_adds_reverse_edges_with_weights(chain):
    chain.undirect()

    assert chain.undirected
    assert chain.number_of_edges() == 4
    assert chain.edges["B", "A"]["weight"] == 1.5
    assert chain.edges["C", "B"]["weight"] == 2.0
    assert shortest_path("C", "A", chain.neighbor_fn()) == ["C", "B", "A"]


def test_undirect_keeps_existing_reverse_edge(chain):
    chain.add_edge("C", "B", weight=9.0)
    chain.undirect()
    assert chain.edges["C", "B"]["weight"] == 9.0
    assert chain.number_of_edges() == 4


def test_neighbors_of_unknown_node_is_empty(chain):
    assert chain.neighbors_of("Z") == set()
    assert chain.neighbors_of("A") == {"B"}


def test_from_neighbors_materializes_reachable_part(diamond_dag):
    g = from_neighbors(1, diamond_dag)

    assert set(g.nodes) == {1, 3, 5, 7, 8, 9}
    assert set(g.edges) == {(1, 3), (3, 5), (5, 7), (7, 8), (7, 9)}


def test_from_neighbors_edge_attributes(hexagon):
    g = from_neighbors(0, hexagon, weight=1)

    assert g.number_of_nodes() == 6
    assert g.number_of_edges() == 12
    assert all(data["weight"] == 1 for _, _, data in g.edges(data=True))


def test_undirected_flag_survives_copies(chain):
    chain.undirect()

    assert chain.copy().undirected
    assert chain.subgraph(["A", "B"]).copy().undirected
    assert AdjacencyGraph(chain).undirected
    assert isinstance(chain.copy(), AdjacencyGraph)

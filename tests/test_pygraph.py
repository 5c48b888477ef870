import numpy as np
import pytest

from classicproblems import pygraph
from classicproblems.classes.utils import total_weight
from classicproblems.core.cities import CITIES, CITY_CONNECTIONS


@pytest.fixture
def cities():
    graph = pygraph(CITIES)
    for first, second in CITY_CONNECTIONS:
        graph.add_edge(first, second)
    return graph


def test_shortest_path_between_cities(cities):
    assert cities.shortest_path("Boston", "Miami") == ["Boston", "Detroit", "Washington", "Miami"]


def test_shortest_path_to_self(cities):
    assert cities.shortest_path("Boston", "Boston") == ["Boston"]


def test_shortest_path_unknown_vertex(cities):
    with pytest.raises(ValueError):
        cities.shortest_path("Boston", "Atlantis")
    with pytest.raises(ValueError):
        cities.shortest_path("Atlantis", "Boston")


def test_shortest_path_unreachable():
    graph = pygraph(["a", "b"])

    assert graph.shortest_path("a", "b") is None


def test_describe_path(cities):
    path = cities.shortest_path_edges("New York", "Chicago")

    assert cities.describe_path(path) == "New York > Detroit\nDetroit > Chicago"


def test_weight_rules():
    unweighted = pygraph(["a", "b"])
    weighted = pygraph(["a", "b"], weighted=True)

    with pytest.raises(ValueError):
        unweighted.add_edge("a", "b", 3.0)
    with pytest.raises(ValueError):
        weighted.add_edge("a", "b")
    assert weighted.add_edge("a", "b", 3.0) is True
    assert weighted.neighbors("a") == ["b"]


def test_weighted_path_total():
    graph = pygraph(weighted=True)
    for vertex in ["p", "q", "r"]:
        graph.add_vertex(vertex)
    graph.add_edge("p", "q", 1.5)
    graph.add_edge("q", "r", 2.0)

    path = graph.shortest_path_edges("p", "r")

    assert total_weight(path) == pytest.approx(3.5)
    np.testing.assert_array_equal(graph.adjacency_matrix(), [[0, 1.5, 0], [1.5, 0, 2.0], [0, 2.0, 0]])


def test_missing_vertex_edge_returns_false(cities):
    assert cities.add_edge("Boston", "Atlantis") is False
    assert cities.neighbors("Atlantis") is None


def test_str_delegates_to_graph(cities):
    assert str(cities).splitlines()[6] == "Boston -> ['Detroit', 'New York']"

import pytest

from classicproblems import PathFinder, UnweightedGraph, WeightedGraph, build_city_graph


@pytest.fixture
def city_graph():
    return build_city_graph()


@pytest.fixture
def city_finder(city_graph):
    return PathFinder(city_graph)


@pytest.fixture
def square_graph():
    """A-B-C-D-A cycle plus a pendant vertex E hanging off D, and isolated F."""
    graph = UnweightedGraph(["A", "B", "C", "D", "E", "F"])
    graph.add_edge_by_indices(0, 1)
    graph.add_edge_by_indices(1, 2)
    graph.add_edge_by_indices(2, 3)
    graph.add_edge_by_indices(3, 0)
    graph.add_edge_by_indices(3, 4)
    return graph


@pytest.fixture
def triangle_weighted():
    graph = WeightedGraph(["x", "y", "z"])
    graph.add_edge_by_indices(0, 1, 2.5)
    graph.add_edge_by_indices(1, 2, 1.0)
    graph.add_edge_by_vertices("x", "z", 4.0)
    return graph

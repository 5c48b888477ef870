import pytest

from classicproblems import PathFinder, PathReconstructionError, UnweightedGraph, pyedge, reconstruct_path
from classicproblems.classes.utils import is_contiguous, path_length


def test_bfs_boston_to_miami(city_graph, city_finder):
    boston = city_graph.index_of_vertex("Boston")

    path = city_finder.bfs(boston, lambda city: city == "Miami")

    assert path_length(path) == 3
    assert city_finder.path_to_vertices(path) == ["Boston", "Detroit", "Washington", "Miami"]
    assert city_finder.describe_path(path) == "Boston > Detroit\nDetroit > Washington\nWashington > Miami"


def test_bfs_seattle_to_miami_breaks_ties_by_insertion_order(city_graph, city_finder):
    seattle = city_graph.index_of_vertex("Seattle")

    path = city_finder.bfs(seattle, lambda city: city == "Miami")

    assert city_finder.path_to_vertices(path) == ["Seattle", "Chicago", "Atlanta", "Miami"]


BOSTON_HOPS = {
    "Boston": 0,
    "Detroit": 1, "New York": 1,
    "Chicago": 2, "Washington": 2, "Philadelphia": 2,
    "Seattle": 3, "Riverside": 3, "Dallas": 3, "Atlanta": 3, "Miami": 3,
    "San Francisco": 4, "Los Angeles": 4, "Phoenix": 4, "Houston": 4,
}


def test_bfs_path_length_is_shortest(city_graph, city_finder):
    boston = city_graph.index_of_vertex("Boston")

    for goal_city, hops in BOSTON_HOPS.items():
        path = city_finder.bfs(boston, lambda city: city == goal_city)
        assert len(path) == hops
        assert is_contiguous(path)
        if path:
            assert path[0].u == boston
            assert city_graph.vertex_at_index(path[-1].v) == goal_city


def test_bfs_matches_shortest_enumerated_path(square_graph):
    finder = PathFinder(square_graph)

    for goal in range(1, 5):
        goal_vertex = square_graph.vertex_at_index(goal)
        path = finder.bfs(0, lambda vertex: vertex == goal_vertex)
        assert len(path) == min(len(p) - 1 for p in finder.find_all_paths(0, goal))


def test_bfs_start_satisfies_goal(city_finder):
    assert city_finder.bfs(0, lambda city: city == "Seattle") == []


def test_bfs_unreachable_returns_none(square_graph):
    finder = PathFinder(square_graph)

    assert finder.bfs(0, lambda vertex: vertex == "F") is None
    assert finder.bfs(0, lambda vertex: vertex == "nowhere") is None


def test_bfs_predecessors_state(square_graph):
    finder = PathFinder(square_graph)

    goal, predecessors = finder.bfs_predecessors(0, lambda vertex: vertex == "E")

    assert goal == 4
    assert predecessors[1] == pyedge(0, 1)
    assert predecessors[3] == pyedge(0, 3)
    assert predecessors[4] == pyedge(3, 4)
    assert 5 not in predecessors


def test_bfs_rejects_bad_start(square_graph):
    finder = PathFinder(square_graph)

    with pytest.raises(IndexError):
        finder.bfs(42, lambda vertex: True)


def test_dfs_finds_contiguous_path(city_graph, city_finder):
    boston = city_graph.index_of_vertex("Boston")

    path = city_finder.dfs(boston, lambda city: city == "Los Angeles")

    assert is_contiguous(path)
    assert city_finder.path_to_vertices(path)[0] == "Boston"
    assert city_finder.path_to_vertices(path)[-1] == "Los Angeles"


def test_dfs_unreachable_returns_none(square_graph):
    assert PathFinder(square_graph).dfs(2, lambda vertex: vertex == "F") is None


def test_distances_and_reachability(square_graph):
    finder = PathFinder(square_graph)

    assert finder.distances_from(0) == {0: 0, 1: 1, 3: 1, 2: 2, 4: 2}
    assert finder.find_reachable_vertices(0) == {0, 1, 2, 3, 4}
    assert finder.find_reachable_vertices(5) == {5}


def test_find_all_paths(square_graph):
    finder = PathFinder(square_graph)

    paths = finder.find_all_paths(0, 2)

    assert sorted(paths) == [[0, 1, 2], [0, 3, 2]]
    assert finder.find_all_paths(0, 0) == []
    assert finder.find_all_paths(0, 5) == []


def test_find_all_paths_respects_max_depth(square_graph):
    finder = PathFinder(square_graph)

    assert finder.find_all_paths(0, 2, max_depth=1) == []


def test_reconstruct_path_walks_back_to_start():
    predecessors = {1: pyedge(0, 1), 2: pyedge(1, 2), 3: pyedge(0, 3)}

    assert reconstruct_path(predecessors, 0, 2) == [pyedge(0, 1), pyedge(1, 2)]
    assert reconstruct_path(predecessors, 0, 0) == []


def test_reconstruct_path_empty_map_fails_loudly():
    with pytest.raises(PathReconstructionError):
        reconstruct_path({}, 0, 3)


def test_reconstruct_path_unvisited_goal_fails_loudly():
    predecessors = {1: pyedge(0, 1)}

    with pytest.raises(LookupError):
        reconstruct_path(predecessors, 0, 7)


def test_reconstruct_path_detects_cycle():
    predecessors = {1: pyedge(2, 1), 2: pyedge(1, 2)}

    with pytest.raises(PathReconstructionError):
        reconstruct_path(predecessors, 0, 1)


def test_path_to_vertices_empty():
    finder = PathFinder(UnweightedGraph(["only"]))

    assert finder.path_to_vertices([]) == []
    assert finder.describe_path([]) == ""

"""
Path finding and reachability analysis for graphs.

This module provides breadth-first and depth-first search, path
reconstruction from predecessor maps, and connectivity queries.
"""

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple
from collections import deque

from ..classes.edge import pyedge
from ..core.graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


class PathReconstructionError(LookupError):
    """Raised when a predecessor map has no chain from the goal back to the start."""


def reconstruct_path(predecessors: Dict[int, pyedge], start: int, goal: int) -> List[pyedge]:
    """
    Rebuild the route from start to goal out of a predecessor map.

    Args:
        predecessors: Mapping of vertex index -> edge used to first reach it
        start: Index the search started from
        goal: Index the route should end at

    Returns:
        Edges from start to goal in travel order; empty when start == goal

    Raises:
        PathReconstructionError: If the chain from goal back to start is broken,
            including when the map is empty
    """
    path = []
    current = goal
    while current != start:
        edge = predecessors.get(current)
        if edge is None:
            raise PathReconstructionError(f"No predecessor recorded for vertex {current} "
                                          f"while reconstructing path {start} -> {goal}")
        path.append(edge)
        current = edge.u
        if len(path) > len(predecessors):
            raise PathReconstructionError(f"Predecessor chain from {goal} never reaches {start}")
    path.reverse()
    return path


class PathFinder:
    """
    Path finding algorithms for graphs.

    This class provides methods for:
    - Breadth-first search (shortest hop paths)
    - Depth-first search
    - Finding all simple paths between vertices
    - Analyzing reachability and hop distances
    - Converting paths to vertex values
    """

    def __init__(self, graph: Graph):
        """
        Initialize the path finder.

        Args:
            graph: Graph instance to analyze
        """
        self.graph = graph

    def bfs_predecessors(self, start: int,
                         goal_test: Callable[[object], bool]) -> Tuple[Optional[int], Dict[int, pyedge]]:
        """
        Run breadth-first search and return its raw state.

        The goal is tested when a vertex leaves the frontier. Neighbors are
        explored in adjacency insertion order, so ties between equally short
        paths go to the edge added first.

        Args:
            start: Index of the starting vertex
            goal_test: Predicate applied to vertex values

        Returns:
            Tuple of (index satisfying the goal or None, predecessor map)

        Raises:
            IndexError: If start is out of range
        """
        self.graph.check_index(start)

        frontier = deque([start])
        visited = {start}
        predecessors: Dict[int, pyedge] = {}

        while frontier:
            current = frontier.popleft()
            if goal_test(self.graph.vertices[current]):
                logger.debug(f"BFS reached goal vertex {current} after visiting {len(visited)} vertices")
                return current, predecessors

            for edge in self.graph.edges[current]:
                if edge.v not in visited:
                    visited.add(edge.v)
                    frontier.append(edge.v)
                    predecessors[edge.v] = edge

        logger.debug(f"BFS from vertex {start} exhausted {len(visited)} vertices without reaching goal")
        return None, predecessors

    def bfs(self, start: int, goal_test: Callable[[object], bool]) -> Optional[List[pyedge]]:
        """
        Find the path with the fewest edges to the first vertex satisfying goal_test.

        Args:
            start: Index of the starting vertex
            goal_test: Predicate applied to vertex values

        Returns:
            List of edges from start to the goal, an empty list if start itself
            satisfies the goal, or None if no reachable vertex does
        """
        goal, predecessors = self.bfs_predecessors(start, goal_test)
        if goal is None:
            return None
        return reconstruct_path(predecessors, start, goal)

    def dfs(self, start: int, goal_test: Callable[[object], bool]) -> Optional[List[pyedge]]:
        """
        Find a path to the first vertex satisfying goal_test using depth-first search.

        Args:
            start: Index of the starting vertex
            goal_test: Predicate applied to vertex values

        Returns:
            List of edges from start to the goal, or None if no path exists
        """
        self.graph.check_index(start)

        frontier = [start]
        visited = {start}
        predecessors: Dict[int, pyedge] = {}

        while frontier:
            current = frontier.pop()
            if goal_test(self.graph.vertices[current]):
                return reconstruct_path(predecessors, start, current)

            for edge in self.graph.edges[current]:
                if edge.v not in visited:
                    visited.add(edge.v)
                    frontier.append(edge.v)
                    predecessors[edge.v] = edge

        return None

    def distances_from(self, start: int) -> Dict[int, int]:
        """
        Compute hop counts from start to every reachable vertex.

        Args:
            start: Index of the starting vertex

        Returns:
            Dictionary mapping vertex index -> number of edges on a shortest path
        """
        self.graph.check_index(start)

        distances = {start: 0}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for edge in self.graph.edges[current]:
                if edge.v not in distances:
                    distances[edge.v] = distances[current] + 1
                    queue.append(edge.v)

        return distances

    def find_reachable_vertices(self, start: int) -> Set[int]:
        """
        Find all vertices connected to start.

        Args:
            start: Index of the starting vertex

        Returns:
            Set of vertex indices reachable from start, including start
        """
        return set(self.distances_from(start))

    def find_all_paths(self, start: int, target: int, max_depth: int = DEFAULT_MAX_DEPTH) -> List[List[int]]:
        """
        Find all simple paths from start to target vertex using DFS.

        Args:
            start: Starting vertex index
            target: Target vertex index
            max_depth: Maximum search depth to prevent runaway enumeration

        Returns:
            List of paths, where each path is a list of vertex indices
        """
        self.graph.check_index(start)
        self.graph.check_index(target)

        paths = []

        def dfs_paths(current: int, path: List[int], visited: Set[int], depth: int):
            if depth > max_depth:
                return

            if current == target:
                paths.append(path.copy())
                return

            visited.add(current)

            for edge in self.graph.edges[current]:
                if edge.v not in visited:
                    path.append(edge.v)
                    dfs_paths(edge.v, path, visited, depth + 1)
                    path.pop()

            visited.remove(current)

        if start != target:
            dfs_paths(start, [start], set(), 0)

        logger.debug(f"Found {len(paths)} paths between vertices {start} -> {target}")
        return paths

    def path_to_vertices(self, path: List[pyedge]) -> List:
        """
        Convert a path of edges to the vertex values it visits.

        Args:
            path: List of contiguous edges

        Returns:
            Vertex values from the first edge's start to the last edge's end
        """
        if not path:
            return []
        return [self.graph.vertices[path[0].u]] + [self.graph.vertices[edge.v] for edge in path]

    def describe_path(self, path: List[pyedge]) -> str:
        """Render a path one hop per line as "from > to"."""
        return "\n".join(f"{self.graph.vertices[edge.u]} > {self.graph.vertices[edge.v]}"
                         for edge in path)

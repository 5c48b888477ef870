"""
Main facade class for graph construction and search.

This module provides the pygraph class, a value-keyed API that delegates to
the core graph and the path finder.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from .graph import UnweightedGraph, WeightedGraph
from ..analysis.pathfinding import PathFinder
from ..classes.edge import pyedge
from ..classes.utils import to_adjacency_matrix

logger = logging.getLogger(__name__)


class pygraph:
    """
    Main facade class for graph work.

    Callers use vertex values throughout; index handling is delegated to the
    underlying graph and path finder.
    """

    def __init__(self, vertices: Optional[Iterable] = None, weighted: bool = False):
        """
        Initialize the graph.

        Args:
            vertices: Optional iterable of vertex values to pre-seed
            weighted: Whether edges carry weights
        """
        self.weighted = weighted
        if weighted:
            self._graph = WeightedGraph(vertices)
        else:
            self._graph = UnweightedGraph(vertices)

        self._pathfinder = PathFinder(self._graph)

    @property
    def graph(self):
        """The underlying index-based graph."""
        return self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_vertex(self, vertex) -> int:
        """Add a vertex and return its index."""
        return self._graph.add_vertex(vertex)

    def add_edge(self, first, second, weight: Optional[float] = None) -> bool:
        """
        Add an undirected edge between two vertex values.

        Args:
            first: The starting vertex value
            second: The ending vertex value
            weight: Edge weight, required for weighted graphs and rejected otherwise

        Returns:
            True if the edge was added, False if either vertex was not found

        Raises:
            ValueError: If weight does not match the graph kind
        """
        if self.weighted:
            if weight is None:
                raise ValueError("Weighted graph requires an edge weight")
            return self._graph.add_edge_by_vertices(first, second, weight)

        if weight is not None:
            raise ValueError("Unweighted graph does not accept an edge weight")
        return self._graph.add_edge_by_vertices(first, second)

    def neighbors(self, vertex) -> Optional[List]:
        """Get the neighbors of a vertex value, or None if the value is absent."""
        return self._graph.neighbors_for_vertex(vertex)

    def adjacency_matrix(self) -> np.ndarray:
        """Dense adjacency matrix of the graph."""
        return to_adjacency_matrix(self._graph)

    # ========================================================================
    # SEARCH
    # ========================================================================

    def _require_index(self, vertex) -> int:
        index = self._graph.index_of_vertex(vertex)
        if index is None:
            raise ValueError(f"Vertex {vertex!r} not found in graph")
        return index

    def shortest_path_edges(self, start, goal) -> Optional[List[pyedge]]:
        """
        Find the fewest-hop path between two vertex values as edges.

        Raises:
            ValueError: If either vertex is not in the graph
        """
        start_index = self._require_index(start)
        self._require_index(goal)
        path = self._pathfinder.bfs(start_index, lambda vertex: vertex == goal)
        if path is None:
            logger.info(f"No path found from {start!r} to {goal!r}")
        else:
            logger.info(f"Found path from {start!r} to {goal!r} with {len(path)} hops")
        return path

    def shortest_path(self, start, goal) -> Optional[List]:
        """
        Find the fewest-hop path between two vertex values.

        Args:
            start: Starting vertex value
            goal: Goal vertex value

        Returns:
            Vertex values along the path (just [start] when start == goal),
            or None if goal is unreachable

        Raises:
            ValueError: If either vertex is not in the graph
        """
        path = self.shortest_path_edges(start, goal)
        if path is None:
            return None
        if not path:
            return [start]
        return self._pathfinder.path_to_vertices(path)

    def describe_path(self, path: List[pyedge]) -> str:
        """Render a path of edges one hop per line."""
        return self._pathfinder.describe_path(path)

    def __str__(self):
        return str(self._graph)

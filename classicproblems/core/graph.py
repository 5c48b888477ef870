"""
Core graph data structure.

This module provides the fundamental graph structure without search or
analysis operations. Vertices are identified by their position in an ordered
list; each vertex owns an adjacency list of the edges leaving it.
"""

import logging
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from ..classes.edge import pyedge, pyweightededge

logger = logging.getLogger(__name__)

V = TypeVar('V')


class Graph(Generic[V]):
    """
    Core graph data structure.

    This class manages the fundamental graph representation:
    - Ordered vertex storage with index lookup
    - Adjacency list maintenance (one list per vertex index)
    - Undirected insertion over directed edges
    - Basic graph queries (neighbors, edges, counts)

    Vertices and edges are append-only; nothing is ever removed.
    """

    def __init__(self, vertices: Optional[Iterable[V]] = None):
        """
        Initialize the graph, optionally pre-seeded with vertices.

        Args:
            vertices: Optional iterable of vertex values, added in order
        """
        self.vertices: List[V] = []
        self.edges: List[List[pyedge]] = []

        if vertices is not None:
            for vertex in vertices:
                self.add_vertex(vertex)

        logger.debug(f"Initialized {type(self).__name__} with {self.vertex_count} vertices")

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        """
        Number of stored adjacency entries.

        Every undirected edge is stored once per endpoint, so it counts twice.
        """
        return sum(len(adjacent) for adjacent in self.edges)

    def check_index(self, index: int):
        """
        Validate a vertex index.

        Raises:
            IndexError: If index is negative or not below vertex_count
        """
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"Vertex index {index} out of range for graph with {len(self.vertices)} vertices")

    def vertex_at_index(self, index: int) -> V:
        """
        Get a vertex by its index.

        Args:
            index: Vertex index (0-based)

        Returns:
            The vertex value stored at index

        Raises:
            IndexError: If index is out of range
        """
        self.check_index(index)
        return self.vertices[index]

    def index_of_vertex(self, vertex: V) -> Optional[int]:
        """
        Find the first occurrence of a vertex.

        Args:
            vertex: The vertex value to look up

        Returns:
            Index of the first matching vertex, or None if not found
        """
        for index, candidate in enumerate(self.vertices):
            if candidate == vertex:
                return index
        return None

    def neighbors_for_index(self, index: int) -> List[V]:
        """
        Find all the neighbors of the vertex at a given index.

        Args:
            index: Vertex index

        Returns:
            Neighbor vertex values in edge insertion order
        """
        self.check_index(index)
        return [self.vertices[edge.v] for edge in self.edges[index]]

    def neighbors_for_vertex(self, vertex: V) -> Optional[List[V]]:
        """Find all the neighbors of a vertex value, or None if the value is absent."""
        index = self.index_of_vertex(vertex)
        if index is None:
            return None
        return self.neighbors_for_index(index)

    def edges_for_index(self, index: int) -> List[pyedge]:
        """
        Get the edges leaving the vertex at a given index.

        Args:
            index: Vertex index

        Returns:
            Copy of the adjacency list for index
        """
        self.check_index(index)
        return list(self.edges[index])

    def edges_for_vertex(self, vertex: V) -> Optional[List[pyedge]]:
        """Get the edges of a vertex value, or None if the value is absent."""
        index = self.index_of_vertex(vertex)
        if index is None:
            return None
        return self.edges_for_index(index)

    def add_vertex(self, vertex: V) -> int:
        """
        Add a vertex to the graph.

        Args:
            vertex: The vertex value to add; duplicates get their own index

        Returns:
            The index where the vertex was added
        """
        self.vertices.append(vertex)
        self.edges.append([])
        return len(self.vertices) - 1

    def add_edge(self, edge: pyedge):
        """
        Add an edge and its reversal to the graph.

        Both endpoints are validated before anything is stored, so a failed
        insertion leaves the graph unmodified.

        Args:
            edge: Edge to add

        Raises:
            IndexError: If either endpoint is not a valid vertex index
        """
        self.check_index(edge.u)
        self.check_index(edge.v)
        self.edges[edge.u].append(edge)
        self.edges[edge.v].append(edge.reversed())

    def __str__(self):
        return "".join(f"{self.vertices[i]} -> {self.neighbors_for_index(i)}\n"
                       for i in range(self.vertex_count))


class UnweightedGraph(Graph[V]):
    """Undirected graph whose edges carry no weight."""

    def add_edge_by_indices(self, u: int, v: int):
        """
        Add an unweighted edge between two vertex indices.

        Args:
            u: Index of the "from" vertex
            v: Index of the "to" vertex

        Raises:
            IndexError: If either index is out of range
        """
        self.add_edge(pyedge(u, v))

    def add_edge_by_vertices(self, first: V, second: V) -> bool:
        """
        Add an unweighted edge between the first occurrences of two vertices.

        Nothing is added when either value is missing from the graph.

        Args:
            first: The starting vertex value
            second: The ending vertex value

        Returns:
            True if the edge was added, False if either vertex was not found
        """
        u = self.index_of_vertex(first)
        v = self.index_of_vertex(second)
        if u is None or v is None:
            logger.warning(f"Edge {first!r} -> {second!r} not added: vertex not found in graph")
            return False
        self.add_edge(pyedge(u, v))
        return True


class WeightedGraph(Graph[V]):
    """Undirected graph whose edges carry a weight."""

    def add_edge_by_indices(self, u: int, v: int, weight: float):
        """
        Add a weighted edge between two vertex indices.

        Raises:
            IndexError: If either index is out of range
        """
        self.add_edge(pyweightededge(u, v, weight))

    def add_edge_by_vertices(self, first: V, second: V, weight: float) -> bool:
        """
        Add a weighted edge between the first occurrences of two vertices.

        Returns:
            True if the edge was added, False if either vertex was not found
        """
        u = self.index_of_vertex(first)
        v = self.index_of_vertex(second)
        if u is None or v is None:
            logger.warning(f"Edge {first!r} -> {second!r} not added: vertex not found in graph")
            return False
        self.add_edge(pyweightededge(u, v, weight))
        return True

    def neighbors_for_index_with_weights(self, index: int) -> List[Tuple[V, float]]:
        """
        Get neighbor values paired with the weight of the connecting edge.

        Args:
            index: Vertex index

        Returns:
            List of (neighbor, weight) tuples in edge insertion order
        """
        self.check_index(index)
        return [(self.vertices[edge.v], edge.weight) for edge in self.edges[index]]

    def __str__(self):
        return "".join(f"{self.vertices[i]} -> {self.neighbors_for_index_with_weights(i)}\n"
                       for i in range(self.vertex_count))

"""
Utility functions for classicproblems.

This module provides shared helpers for working with paths and graphs,
including path validation, weight totals and matrix conversion.
"""

import logging
from typing import List

import numpy as np

from .edge import pyedge

logger = logging.getLogger(__name__)


def is_contiguous(path: List[pyedge]) -> bool:
    """
    Check that each edge starts where the previous one ended.

    Args:
        path: List of edges

    Returns:
        True if the edges form a walk (an empty path is contiguous)
    """
    return all(first.v == second.u for first, second in zip(path, path[1:]))


def path_length(path: List[pyedge]) -> int:
    """Number of hops in a path."""
    return len(path)


def total_weight(path: List[pyedge]) -> float:
    """
    Sum the weights along a path.

    Args:
        path: List of weighted edges

    Returns:
        Total weight of the path

    Raises:
        TypeError: If any edge in the path is unweighted
    """
    total = 0.0
    for edge in path:
        weight = getattr(edge, 'weight', None)
        if weight is None:
            raise TypeError(f"Edge {edge} has no weight")
        total += weight
    return total


def to_adjacency_matrix(graph) -> np.ndarray:
    """
    Build a dense adjacency matrix from a graph.

    Args:
        graph: Graph instance

    Returns:
        Square float array where entry [u, v] holds the edge weight, 1 for
        unweighted edges, and 0 where no edge exists
    """
    n = graph.vertex_count
    matrix = np.zeros((n, n), dtype=float)

    for u, adjacent in enumerate(graph.edges):
        for edge in adjacent:
            matrix[u, edge.v] = getattr(edge, 'weight', 1.0)

    logger.debug(f"Built {n}x{n} adjacency matrix with {np.count_nonzero(matrix)} entries")
    return matrix

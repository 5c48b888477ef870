"""
Core data classes and helpers for graph representation.

This module contains the edge types and path utilities used throughout
the classicproblems library.
"""

from .edge import pyedge, pyweightededge
from .utils import is_contiguous, path_length, total_weight, to_adjacency_matrix

__all__ = [
    'pyedge',
    'pyweightededge',
    'is_contiguous',
    'path_length',
    'total_weight',
    'to_adjacency_matrix',
]

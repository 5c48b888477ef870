"""
Core graph data structures and management.

This module contains the fundamental graph representation and basic
graph operations without search or analysis.
"""

from .graph import Graph, UnweightedGraph, WeightedGraph
from .cities import CITIES, CITY_CONNECTIONS, build_city_graph

__all__ = [
    'Graph',
    'UnweightedGraph',
    'WeightedGraph',
    'CITIES',
    'CITY_CONNECTIONS',
    'build_city_graph',
]

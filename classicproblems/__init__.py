"""
classicproblems - Classic Computer Science Problems

A Python library of classic computer science exercises built around a small
generic graph framework with breadth-first search.

Main Classes:
    pygraph: Value-keyed graph facade with shortest-path search
    Graph: Generic index-based graph with undirected edge insertion
    UnweightedGraph: Graph of unweighted edges
    WeightedGraph: Graph of weighted edges
    PathFinder: Breadth-first and depth-first search over a graph
    pyedge: Edge representation between vertex indices
    pyweightededge: Edge carrying a weight

Example:
    >>> from classicproblems import build_city_graph, PathFinder
    >>> city_graph = build_city_graph()
    >>> finder = PathFinder(city_graph)
    >>> path = finder.bfs(city_graph.index_of_vertex("Boston"), lambda city: city == "Miami")
    >>> print(finder.describe_path(path))
"""

__version__ = "0.1.0"

from classicproblems.classes.edge import pyedge, pyweightededge
from classicproblems.core.graph import Graph, UnweightedGraph, WeightedGraph
from classicproblems.core.cities import build_city_graph
from classicproblems.analysis.pathfinding import PathFinder, PathReconstructionError, reconstruct_path
from classicproblems.core.pygraph import pygraph

__all__ = [
    'pygraph',
    'Graph',
    'UnweightedGraph',
    'WeightedGraph',
    'PathFinder',
    'PathReconstructionError',
    'reconstruct_path',
    'build_city_graph',
    'pyedge',
    'pyweightededge',
]

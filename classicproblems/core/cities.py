"""
Example data: fifteen of the largest metropolitan areas in the United States
and the transit links between them.
"""

from typing import List, Tuple

from .graph import UnweightedGraph

CITIES: List[str] = [
    "Seattle", "San Francisco", "Los Angeles", "Riverside", "Phoenix",
    "Chicago", "Boston", "New York", "Atlanta", "Miami",
    "Dallas", "Houston", "Detroit", "Philadelphia", "Washington",
]

CITY_CONNECTIONS: List[Tuple[str, str]] = [
    ("Seattle", "Chicago"),
    ("Seattle", "San Francisco"),
    ("San Francisco", "Riverside"),
    ("San Francisco", "Los Angeles"),
    ("Los Angeles", "Riverside"),
    ("Los Angeles", "Phoenix"),
    ("Riverside", "Phoenix"),
    ("Riverside", "Chicago"),
    ("Phoenix", "Dallas"),
    ("Phoenix", "Houston"),
    ("Dallas", "Chicago"),
    ("Dallas", "Atlanta"),
    ("Dallas", "Houston"),
    ("Houston", "Atlanta"),
    ("Houston", "Miami"),
    ("Atlanta", "Chicago"),
    ("Atlanta", "Washington"),
    ("Atlanta", "Miami"),
    ("Miami", "Washington"),
    ("Chicago", "Detroit"),
    ("Detroit", "Boston"),
    ("Detroit", "Washington"),
    ("Detroit", "New York"),
    ("Boston", "New York"),
    ("New York", "Philadelphia"),
    ("Philadelphia", "Washington"),
]


def build_city_graph() -> UnweightedGraph:
    """Build the unweighted city graph with connections added in the order above."""
    city_graph = UnweightedGraph(CITIES)
    for first, second in CITY_CONNECTIONS:
        city_graph.add_edge_by_vertices(first, second)
    return city_graph

"""
Edge representation between two vertex indices.

Edges are directed arcs. Graphs store an edge in the adjacency list of its
"from" vertex and its reversal in the list of its "to" vertex, which gives an
undirected view over directed storage.
"""

import functools


class pyedge:
    """
    Unweighted edge between two vertex indices.

    Attributes:
        u: Index of the "from" vertex
        v: Index of the "to" vertex
    """

    def __init__(self, u: int, v: int):
        """
        Initialize an edge.

        Args:
            u: Index of the "from" vertex
            v: Index of the "to" vertex
        """
        self.u = u
        self.v = v

    def reversed(self) -> 'pyedge':
        """Return a new edge with the endpoints swapped."""
        return pyedge(self.v, self.u)

    def __eq__(self, other):
        if not isinstance(other, pyedge) or isinstance(other, pyweightededge):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self):
        return hash((self.u, self.v))

    def __repr__(self):
        return f"pyedge(u={self.u}, v={self.v})"

    def __str__(self):
        return f"{self.u} <-> {self.v}"


@functools.total_ordering
class pyweightededge(pyedge):
    """
    Edge carrying a weight.

    Reversal keeps the weight. Weighted edges order by weight, then by
    endpoints, so they can be sorted or pushed onto a heap directly.
    """

    def __init__(self, u: int, v: int, weight: float):
        super().__init__(u, v)
        self.weight = weight

    def reversed(self) -> 'pyweightededge':
        return pyweightededge(self.v, self.u, self.weight)

    def __eq__(self, other):
        if not isinstance(other, pyweightededge):
            return NotImplemented
        return self.u == other.u and self.v == other.v and self.weight == other.weight

    def __lt__(self, other):
        if not isinstance(other, pyweightededge):
            return NotImplemented
        return (self.weight, self.u, self.v) < (other.weight, other.u, other.v)

    def __hash__(self):
        return hash((self.u, self.v, self.weight))

    def __repr__(self):
        return f"pyweightededge(u={self.u}, v={self.v}, weight={self.weight})"

    def __str__(self):
        return f"{self.u} <{self.weight}> {self.v}"

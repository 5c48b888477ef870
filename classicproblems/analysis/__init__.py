"""
Graph analysis modules for searching and path finding.
"""

from .pathfinding import DEFAULT_MAX_DEPTH, PathFinder, PathReconstructionError, reconstruct_path

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'PathFinder',
    'PathReconstructionError',
    'reconstruct_path',
]

"""
Core graph data structures.

This module contains the dense adjacency-matrix graph representation and its
directed and undirected variants, without any whole-graph transforms.
"""

from .exceptions import ErrorKind, GraphError, OutOfBoundsError, EmptyGraphError, DegenerateRangeError
from .graph import AMGraph
from .undirected import AMUndirectedGraph
from .directed import AMDirectedGraph, Cell

__all__ = [
    'ErrorKind',
    'GraphError',
    'OutOfBoundsError',
    'EmptyGraphError',
    'DegenerateRangeError',
    'AMGraph',
    'AMUndirectedGraph',
    'AMDirectedGraph',
    'Cell',
]

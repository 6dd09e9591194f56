"""
amgraph - Dense Adjacency-Matrix Graph Library

A Python library providing dense adjacency-matrix graphs (directed and
undirected) backed by numpy, together with whole-graph transforms and a few
vector helpers.

Main Classes:
    AMGraph: Dense base graph (directed edge writes)
    AMUndirectedGraph: Symmetric graph with degree counting
    AMDirectedGraph: Directed graph with unchecked cell access

Example:
    >>> from amgraph import AMDirectedGraph, normalize_max_min
    >>> graph = AMDirectedGraph(3, dtype=int)
    >>> graph.set_edge(0, 1, 4)
    >>> graph.add_to_edge(0, 1, 1)
    >>> graph.get(0, 1)
    5
    >>> normalize_max_min(graph).get(0, 1)
    1.0
"""

__version__ = "0.1.0"

from amgraph.core.exceptions import (
    ErrorKind,
    GraphError,
    OutOfBoundsError,
    EmptyGraphError,
    EmptyVectorError,
    DegenerateRangeError,
)
from amgraph.core.graph import AMGraph, DEFAULT_DTYPE
from amgraph.core.undirected import AMUndirectedGraph
from amgraph.core.directed import AMDirectedGraph, Cell
from amgraph.operations.transform import normalize_max_min, segment_boolean
from amgraph.utils.vector import (
    NormalizationMethod,
    append_vectors,
    get_vector_max_min,
    vector_normalization,
    euclidean_distance,
    render_vector,
)

__all__ = [
    'AMGraph',
    'AMUndirectedGraph',
    'AMDirectedGraph',
    'Cell',
    'DEFAULT_DTYPE',
    'normalize_max_min',
    'segment_boolean',
    'NormalizationMethod',
    'append_vectors',
    'get_vector_max_min',
    'vector_normalization',
    'euclidean_distance',
    'render_vector',
    'ErrorKind',
    'GraphError',
    'OutOfBoundsError',
    'EmptyGraphError',
    'EmptyVectorError',
    'DegenerateRangeError',
]

"""
Error kinds raised by the adjacency-matrix graph library.

Every failure carries the offending indices, sizes or values as attributes so
callers can react on ``type``/``kind`` rather than on message text.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Categories of graph failures."""
    OUT_OF_BOUNDS = "out_of_bounds"
    EMPTY_GRAPH = "empty_graph"
    DEGENERATE_RANGE = "degenerate_range"


class GraphError(Exception):
    """Base class for all graph errors."""

    kind: ErrorKind


class OutOfBoundsError(GraphError, IndexError):
    """
    A checked accessor received a vertex index outside ``[0, size)``.

    Attributes:
        i: Row (source vertex) index that was requested
        j: Column (target vertex) index that was requested
        size: Vertex count of the graph at the time of the call
    """

    kind = ErrorKind.OUT_OF_BOUNDS

    def __init__(self, i: int, j: int, size: int):
        self.i = i
        self.j = j
        self.size = size
        super().__init__(f"graph of size {size} has no connection {i}->{j}")


class EmptyGraphError(GraphError, ValueError):
    """A transform was requested on a graph with no vertices."""

    kind = ErrorKind.EMPTY_GRAPH

    def __init__(self, message: str = "graph has no vertices"):
        super().__init__(message)


class EmptyVectorError(EmptyGraphError):
    """A vector reduction was requested on an empty vector."""

    def __init__(self):
        super().__init__("vector has no elements")


class DegenerateRangeError(GraphError, ValueError):
    """
    Normalization input spans no range (every value is the same).

    Attributes:
        value: The single value found in the input
    """

    kind = ErrorKind.DEGENERATE_RANGE

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        super().__init__(message or f"all values equal {value}, range is zero")

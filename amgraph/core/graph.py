"""
Dense adjacency-matrix graph data structure.

This module provides the base graph representation shared by the directed and
undirected variants. Rows index the source vertex of a connection and columns
index the target vertex.
"""

import logging
import operator
from typing import Any, Optional

import numpy as np

from .exceptions import OutOfBoundsError

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float64


def check_dtype(dtype: Any) -> np.dtype:
    """
    Resolve ``dtype`` and make sure it can hold edge values.

    Edge values must be ordered and support subtraction, so only boolean,
    integer and real floating dtypes are accepted.

    Args:
        dtype: Anything ``numpy.dtype`` understands

    Returns:
        The resolved numpy dtype

    Raises:
        TypeError: If the dtype is not a real numeric or boolean type
    """
    dtype = np.dtype(dtype)
    if dtype == np.bool_:
        return dtype
    if np.issubdtype(dtype, np.number) and not np.issubdtype(dtype, np.complexfloating):
        return dtype
    raise TypeError(f"Unsupported edge value type: {dtype}")


class AMGraph:
    """
    Adjacency-matrix graph with a fixed number of vertices.

    The graph owns a square ``numpy`` matrix holding one element per ordered
    pair of vertices. Cells equal to the zero value of the element type mean
    "no edge". Edges set through the base class are directed.
    """

    def __init__(self, size: int = 0, dtype: Any = DEFAULT_DTYPE):
        """
        Allocate a ``size`` x ``size`` graph with every cell set to zero.

        Args:
            size: Number of vertices
            dtype: Element type of the edge values
        """
        self._dtype = check_dtype(dtype)
        self._size = 0
        self._matrix = np.zeros((0, 0), dtype=self._dtype)
        self.resize(size)

    @classmethod
    def from_numpy(cls, array: Any, dtype: Optional[Any] = None) -> "AMGraph":
        """
        Build a graph from a square 2-D array. The data is copied.

        Args:
            array: Square array-like of edge values
            dtype: Element type; defaults to the array's own dtype

        Returns:
            New graph holding a copy of ``array``

        Raises:
            ValueError: If ``array`` is not a square matrix
        """
        matrix = np.asarray(array)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {matrix.shape}")

        graph = cls(matrix.shape[0], dtype=matrix.dtype if dtype is None else dtype)
        graph._validate_matrix(matrix)
        graph._matrix = np.array(matrix, dtype=graph._dtype, copy=True)
        return graph

    @property
    def size(self) -> int:
        """Number of vertices."""
        return self._size

    @property
    def dtype(self) -> np.dtype:
        """Element type of the edge values."""
        return self._dtype

    def get_size(self) -> int:
        return self._size

    def resize(self, size: int):
        """
        Reallocate the matrix to ``size`` x ``size``.

        All cells are reset to zero, including the ones that were inside the
        previous bounds.

        Args:
            size: New number of vertices

        Raises:
            TypeError: If ``size`` is not an integer
            ValueError: If ``size`` is negative
        """
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"Graph size must be non-negative, got {size}")

        self._size = size
        self._matrix = np.zeros((size, size), dtype=self._dtype)
        logger.debug(f"Allocated {size}x{size} adjacency matrix of {self._dtype}")

    def set_edge(self, i_from: int, i_to: int, value: Any):
        """
        Set the value of the connection ``i_from`` -> ``i_to``.

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is not a vertex of the graph
        """
        self._check_indices(i_from, i_to)
        self._matrix[i_from, i_to] = value

    def get(self, i: int, j: int) -> Any:
        """
        Get the value of the connection ``i`` -> ``j``.

        Returns:
            The cell value as a plain Python scalar

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is not a vertex of the graph
        """
        self._check_indices(i, j)
        return self._matrix[i, j].item()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the adjacency matrix."""
        return self._matrix.copy()

    def render(self) -> str:
        """
        Render the matrix as a text table.

        The header row lists the target vertices and each following row starts
        with its source vertex.
        """
        rule = "-------" * self._size
        lines = [rule]
        lines.append("|  v  |  " + "".join(f"{j}  |  " for j in range(self._size)))
        lines.append(rule)
        for i, row in enumerate(self._matrix.tolist()):
            lines.append(f"|  {i}  |  " + "".join(f"{elem}  |  " for elem in row))
        lines.append(rule)
        return "\n".join(lines)

    def print_graph(self):
        print(self.render())

    def _check_indices(self, i: int, j: int):
        for index in (i, j):
            if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
                raise TypeError(f"Vertex index must be an integer, got {index!r}")
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise OutOfBoundsError(i, j, self._size)

    def _validate_matrix(self, matrix: np.ndarray):
        """Hook for subclasses to reject matrices that break their invariants."""

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AMGraph):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self._size == other._size and bool(np.array_equal(self._matrix, other._matrix))

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, dtype={self._dtype})"

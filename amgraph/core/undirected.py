"""
Undirected adjacency-matrix graph.

Every write goes to both ``(i, j)`` and ``(j, i)`` so the matrix stays
symmetric.
"""

import logging
from typing import Any, List

import numpy as np

from .graph import AMGraph, DEFAULT_DTYPE

logger = logging.getLogger(__name__)


class AMUndirectedGraph(AMGraph):
    """
    Adjacency-matrix graph whose connections have no direction.

    This class adds to the dense base:
    - Symmetric edge writes
    - Edge weight accumulation
    - Structural degree counting
    """

    def __init__(self, size: int = 0, dtype: Any = DEFAULT_DTYPE):
        super().__init__(size, dtype=dtype)

    def set_edge(self, i: int, j: int, value: Any):
        """
        Set the value of the connection between ``i`` and ``j``.

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is not a vertex of the graph
        """
        self._check_indices(i, j)
        self._matrix[i, j] = value
        self._matrix[j, i] = value

    def add_to_edge(self, i: int, j: int, value: Any):
        """
        Add ``value`` to the connection between ``i`` and ``j``.

        Useful to collapse parallel edges of a multigraph into a single
        weight. A self loop is incremented once.

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is not a vertex of the graph
        """
        self._check_indices(i, j)
        self._matrix[i, j] += value
        if i != j:
            self._matrix[j, i] += value

    def degree(self, not_edge_value: Any = 0) -> List[int]:
        """
        Count the connections of every vertex.

        Args:
            not_edge_value: Cell value meaning "no edge"

        Returns:
            Number of cells different from ``not_edge_value`` in each row,
            in vertex order
        """
        degrees = np.count_nonzero(self._matrix != not_edge_value, axis=1)
        logger.debug(f"Counted degrees of {self._size} vertices with sentinel {not_edge_value}")
        return [int(d) for d in degrees]

    def _validate_matrix(self, matrix: np.ndarray):
        equal_nan = np.issubdtype(matrix.dtype, np.floating)
        if not np.array_equal(matrix, matrix.T, equal_nan=equal_nan):
            raise ValueError("Adjacency matrix of an undirected graph must be symmetric")

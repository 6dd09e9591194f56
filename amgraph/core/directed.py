"""
Directed adjacency-matrix graph.

Connections go from the row vertex to the column vertex; ``(i, j)`` and
``(j, i)`` are independent and self loops are allowed.
"""

from typing import Any, Tuple

import numpy as np

from .graph import AMGraph, DEFAULT_DTYPE


class Cell:
    """
    Unchecked read/write handle on a single matrix cell.

    The handle is bound to the matrix that existed when it was created; it
    must not be used after the owning graph is resized.
    """

    def __init__(self, matrix: np.ndarray, i_from: int, i_to: int):
        self._matrix = matrix
        self._index: Tuple[int, int] = (i_from, i_to)

    @property
    def value(self) -> Any:
        return self._matrix[self._index].item()

    @value.setter
    def value(self, value: Any):
        self._matrix[self._index] = value

    def add(self, value: Any):
        self._matrix[self._index] += value

    def __repr__(self) -> str:
        return f"Cell({self._index[0]}->{self._index[1]})"


class AMDirectedGraph(AMGraph):
    """Adjacency-matrix graph whose connections have a direction."""

    def __init__(self, size: int = 0, dtype: Any = DEFAULT_DTYPE):
        super().__init__(size, dtype=dtype)

    def add_to_edge(self, i_from: int, i_to: int, value: Any):
        """
        Add ``value`` to the connection ``i_from`` -> ``i_to`` only.

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is not a vertex of the graph
        """
        self._check_indices(i_from, i_to)
        self._matrix[i_from, i_to] += value

    def at(self, i_from: int, i_to: int) -> Cell:
        """
        Get a mutable handle on the connection ``i_from`` -> ``i_to``.

        Unlike ``get``/``set_edge`` no bounds check is made: the caller must
        have validated the indices. Negative indices wrap around and indices
        past the end raise ``IndexError`` when the handle is used.

        Args:
            i_from: Source vertex
            i_to: Target vertex

        Returns:
            Cell handle with a read/write ``value`` and an ``add`` method
        """
        return Cell(self._matrix, i_from, i_to)

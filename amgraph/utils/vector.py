"""
Vector helpers used alongside the graph transforms.

All functions are single-pass reductions returning new arrays; the inputs are
never modified.
"""

import logging
from enum import Enum
from typing import Any, Optional, Tuple, Union

import numpy as np

from ..core.exceptions import DegenerateRangeError, EmptyVectorError

logger = logging.getLogger(__name__)


class NormalizationMethod(Enum):
    """Available vector normalization methods."""
    MAX_MIN = "max_min"
    SUM_TO_ONE = "sum_to_one"


def append_vectors(v1: Any, v2: Any) -> np.ndarray:
    """Return the elements of ``v1`` followed by the elements of ``v2``."""
    return np.concatenate([np.asarray(v1).ravel(), np.asarray(v2).ravel()])


def get_vector_max_min(v: Any) -> Tuple[Any, Any]:
    """
    Find the largest and smallest element of a vector.

    Args:
        v: Vector of numbers

    Returns:
        Tuple of (max, min) as plain Python scalars

    Raises:
        EmptyVectorError: If the vector has no elements
    """
    values = np.asarray(v)
    if values.size == 0:
        raise EmptyVectorError()
    return values.max().item(), values.min().item()


def vector_normalization(v: Any,
                         norm_type: Union[NormalizationMethod, str] = NormalizationMethod.MAX_MIN) -> np.ndarray:
    """
    Normalize a vector.

    ``max_min`` rescales the elements into [0, 1]; ``sum_to_one`` divides
    every element by the total so the result sums to one.

    Args:
        v: Vector of numbers
        norm_type: Normalization method or its name

    Returns:
        New float64 vector

    Raises:
        ValueError: If ``norm_type`` does not name a method
        EmptyVectorError: If the vector has no elements
        DegenerateRangeError: If all elements are equal (``max_min``) or they
            sum to zero (``sum_to_one``)
    """
    method = NormalizationMethod(norm_type)
    values = np.asarray(v, dtype=np.float64)
    if values.size == 0:
        raise EmptyVectorError()

    if method is NormalizationMethod.MAX_MIN:
        max_value, min_value = values.max(), values.min()
        if max_value == min_value:
            raise DegenerateRangeError(max_value.item())
        return (values - min_value) / (max_value - min_value)

    total = values.sum()
    if total == 0:
        raise DegenerateRangeError(0.0, "vector sums to zero")
    return values / total


def euclidean_distance(v1: Any, v2: Optional[Any] = None) -> float:
    """
    Euclidean norm of ``v1``, or distance between ``v1`` and ``v2``.

    Raises:
        ValueError: If ``v1`` and ``v2`` have different sizes
    """
    a = np.asarray(v1, dtype=np.float64)
    if v2 is None:
        return float(np.sqrt(np.sum(a ** 2)))

    b = np.asarray(v2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"v1 and v2 must have the same size, got {a.size} and {b.size}")
    return float(np.sqrt(np.sum((a - b) ** 2)))


def render_vector(v: Any) -> str:
    """Render a vector as ``| a | b | c |``."""
    return "| " + "".join(f"{elem} | " for elem in np.asarray(v).tolist()).rstrip()

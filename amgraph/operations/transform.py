"""
Whole-graph transforms producing a new graph of another element type.

Both transforms return a graph of the same class and size as their input,
leaving the input untouched.
"""

import logging
from typing import Any

import numpy as np

from ..core.exceptions import DegenerateRangeError, EmptyGraphError
from ..core.graph import AMGraph

logger = logging.getLogger(__name__)


def normalize_max_min(graph: AMGraph) -> AMGraph:
    """
    Rescale every edge value into [0, 1] using the global minimum and maximum.

    Each output cell is ``(value - min) / (max - min)`` computed in float64.

    Args:
        graph: Graph to normalize

    Returns:
        New float64 graph of the same class and size

    Raises:
        EmptyGraphError: If the graph has no vertices
        DegenerateRangeError: If every cell holds the same value
        ValueError: If the graph holds NaN or infinite values
    """
    if graph.size == 0:
        raise EmptyGraphError("cannot normalize a graph with no vertices")

    values = graph.to_numpy().astype(np.float64)
    if not np.isfinite(values).all():
        raise ValueError("cannot normalize a graph holding NaN or infinite values")

    max_value = values.max()
    min_value = values.min()
    if max_value == min_value:
        raise DegenerateRangeError(graph.get(0, 0))

    normalized = (values - min_value) / (max_value - min_value)
    logger.debug(f"Normalized {graph.size}x{graph.size} graph from range [{min_value}, {max_value}]")
    return type(graph).from_numpy(normalized, dtype=np.float64)


def segment_boolean(graph: AMGraph, lower: Any, upper: Any) -> AMGraph:
    """
    Mark the edges whose value lies in the inclusive range [lower, upper].

    An inverted range (``lower > upper``) matches nothing and yields an
    all-false graph.

    Args:
        graph: Graph to segment
        lower: Smallest value to keep
        upper: Largest value to keep

    Returns:
        New boolean graph of the same class and size
    """
    values = graph.to_numpy()
    if lower > upper:
        logger.warning(f"Inverted segmentation range [{lower}, {upper}], no edge will be kept")
        mask = np.zeros(values.shape, dtype=np.bool_)
    else:
        mask = (values >= lower) & (values <= upper)

    logger.debug(f"Segmented {int(mask.sum())} of {mask.size} cells into [{lower}, {upper}]")
    return type(graph).from_numpy(mask, dtype=np.bool_)

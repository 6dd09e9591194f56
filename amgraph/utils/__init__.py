"""
Vector helpers shared across the amgraph package.
"""

from .vector import (
    NormalizationMethod,
    append_vectors,
    get_vector_max_min,
    vector_normalization,
    euclidean_distance,
    render_vector,
)

__all__ = [
    'NormalizationMethod',
    'append_vectors',
    'get_vector_max_min',
    'vector_normalization',
    'euclidean_distance',
    'render_vector',
]

"""
Graph transforms.

This module contains functions that turn a graph into a new graph of another
element type, such as max-min normalization and boolean segmentation.
"""

from .transform import normalize_max_min, segment_boolean

__all__ = ['normalize_max_min', 'segment_boolean']

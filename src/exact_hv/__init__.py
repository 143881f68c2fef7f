"""exact-hv: Exact Hypervolume Indicator.

A numpy implementation of the hypervolume indicator for Pareto-front
approximations in any number of objectives (minimization). Volumes are exact,
computed by recursively slicing the union of point boxes into exclusive parts.

Example (three objectives):
    >>> from exact_hv import compute
    >>> compute([[0.5, 0.5, 0.5]], [1.0, 1.0, 1.0])
    0.125

Example (many fronts, by algorithm name):
    >>> from exact_hv import compute_many
    >>> compute_many([[[1.0, 3.0], [3.0, 1.0]], [[2.0, 2.0]]], [4.0, 4.0], algorithm="sweep_2d")
    array([5., 4.])
"""

from exact_hv.batch import compute_many
from exact_hv.engine import compute, exclusive_hypervolume
from exact_hv.primitives import (
    box_volume,
    intersection_corner,
    is_sorted_by_first_coordinate,
    sort_by_first_coordinate,
    staircase_filter,
)
from exact_hv.protocols import HypervolumeAlgorithm
from exact_hv.registry import HypervolumeRegistry, list_algorithms
from exact_hv.sweep import sweep_2d

__all__ = [
    # Algorithms
    "compute",
    "sweep_2d",
    "compute_many",
    # Primitives
    "box_volume",
    "intersection_corner",
    "sort_by_first_coordinate",
    "is_sorted_by_first_coordinate",
    "staircase_filter",
    "exclusive_hypervolume",
    # Registry system
    "HypervolumeAlgorithm",
    "HypervolumeRegistry",
    "list_algorithms",
]

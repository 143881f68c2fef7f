"""Exact hypervolume by recursive exclusive-volume slicing.

The volume of the union of boxes is computed by case on the number of points:

- 0 points: 0
- 1 point: the box volume
- 2 points: inclusion-exclusion, vol(a) + vol(b) - vol(max(a, b))
- 3+ points: sort by the first objective, then sum, for each point, the part
  of its box not covered by any later point's box

The uncovered ("exclusive") part of a point is its box volume minus the union
of its intersections with later points. That union is itself a hypervolume
over a smaller set, so the two functions recurse into each other until a base
case is reached.

Example:
    >>> round(compute([[0.3, 0.5], [0.6, 0.2]], [1.0, 1.0]), 6)
    0.47
"""

import logging

import numpy as np

from exact_hv.primitives import (
    box_volume,
    intersection_corner,
    is_sorted_by_first_coordinate,
    sort_by_first_coordinate,
    staircase_filter,
)
from exact_hv.validation import as_point_set, as_reference_point

logger = logging.getLogger(__name__)


def compute(points, reference_point, n_workers: int = 1) -> float:
    """Compute the exact hypervolume of points relative to reference_point.

    Each point spans a box towards the reference point; the result is the
    volume of the union of those boxes. Lower is better in every objective.
    Duplicate, dominated and on-front points do not change the result, nor
    does the order of points.

    Points worse than the reference point on some objective are not rejected;
    the value returned for them has no geometric meaning.

    Args:
        points: Array-like of shape (n, n_obj). May be empty.
        reference_point: Array-like of shape (n_obj,), n_obj >= 1.
        n_workers: Number of joblib workers for the top-level sum. 1 runs
            sequentially, -1 uses all CPU cores.

    Returns:
        Non-negative hypervolume; 0.0 if points is empty.

    Raises:
        ValueError: If reference_point is empty or not 1D, points do not match
            its dimension, or any coordinate is NaN or inf.

    Examples:
        >>> compute([[0.5, 0.5, 0.5]], [1.0, 1.0, 1.0])
        0.125
        >>> compute([], [1.0, 1.0])
        0.0
    """
    ref = as_reference_point(reference_point)
    pts = as_point_set(points, ref.shape[0])

    if n_workers == 0:
        raise ValueError("n_workers must be non-zero")

    logger.debug(f"Computing hypervolume of {pts.shape[0]} points in {ref.shape[0]} objectives")

    # cancellation in vol(point) - union can leave a tiny negative total
    if n_workers == 1 or pts.shape[0] < 3:
        return max(0.0, _hypervolume(pts, ref))

    from joblib import Parallel, delayed

    pts = sort_by_first_coordinate(pts)
    contributions: list[float] = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
        delayed(exclusive_hypervolume)(pts[i], pts[i + 1 :], ref) for i in range(pts.shape[0])
    )
    return max(0.0, float(sum(contributions)))


def _hypervolume(points: np.ndarray, reference_point: np.ndarray) -> float:
    n = points.shape[0]

    if n == 0:
        return 0.0

    if n == 1:
        return box_volume(points[0], reference_point)

    if n == 2:
        return (
            box_volume(points[0], reference_point)
            + box_volume(points[1], reference_point)
            - box_volume(intersection_corner(points[0], points[1]), reference_point)
        )

    # exclusive_hypervolume requires later points sorted by the first objective
    points = sort_by_first_coordinate(points)
    return sum(exclusive_hypervolume(points[i], points[i + 1 :], reference_point) for i in range(n))


def exclusive_hypervolume(point: np.ndarray, later: np.ndarray, reference_point: np.ndarray) -> float:
    """Compute the part of point's box not covered by the boxes of later points.

    Args:
        point: The point whose exclusive volume is wanted. Shape (n_obj,).
        later: Points processed after it, sorted ascending by the first
            objective, each with a first coordinate >= point's. Shape (n, n_obj).
        reference_point: Shape (n_obj,).

    Returns:
        vol(point) minus the volume of the union of point's box with each later
        point's box.

    Raises:
        ValueError: If later is not sorted by its first coordinate.
    """
    if not is_sorted_by_first_coordinate(later):
        raise ValueError("later points must be sorted ascending by their first coordinate")

    volume = box_volume(point, reference_point)
    if later.shape[0] == 0:
        return volume

    limited = staircase_filter(intersection_corner(later, point))

    if limited.shape[0] == 1:
        return volume - box_volume(limited[0], reference_point)
    return volume - _hypervolume(limited, reference_point)

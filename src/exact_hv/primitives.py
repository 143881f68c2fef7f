"""Geometric primitives for hypervolume computation.

This module provides the pure functions the slicing algorithm is built from:
- box_volume: volume of the box spanned by a point and the reference point
- intersection_corner: corner of the overlap of two point boxes
- sort_by_first_coordinate: stable sort of a point set on objective 0
- is_sorted_by_first_coordinate: check of that ordering
- staircase_filter: drop intersection corners already covered by a kept one

All functions assume minimization: a point's box extends from the point up
to the reference point.
"""

import numpy as np


def box_volume(point: np.ndarray, reference_point: np.ndarray) -> float:
    """Compute the volume of the box with opposite corners point and reference_point.

    Args:
        point: Coordinates of the point. Shape (n_obj,).
        reference_point: Coordinates of the reference point. Shape (n_obj,).

    Returns:
        Product of the absolute per-axis distances.

    Raises:
        ValueError: If the two corners differ in length or are empty.

    Examples:
        >>> box_volume(np.array([0.5, 0.5, 0.5]), np.array([1.0, 1.0, 1.0]))
        0.125
    """
    if point.shape != reference_point.shape:
        raise ValueError(f"point has shape {point.shape}, expected {reference_point.shape}")
    if point.size == 0:
        raise ValueError("box corners must have at least one dimension")

    return float(np.prod(np.abs(point - reference_point)))


def intersection_corner(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Return the corner of the overlap between the boxes of a and b.

    Both boxes share the reference point as their far corner, so the overlap
    starts at whichever coordinate lies farther from it on each axis, i.e. the
    coordinate-wise maximum.

    Args:
        a: A point of shape (n_obj,) or a point set of shape (n, n_obj).
        b: A point of shape (n_obj,) or a point set of shape (n, n_obj).

    Returns:
        Coordinate-wise maximum, broadcast over a point set if one is given.

    Raises:
        ValueError: If the trailing dimensions differ or are empty.

    Examples:
        >>> intersection_corner(np.array([0.3, 0.5]), np.array([0.6, 0.2]))
        array([0.6, 0.5])
    """
    if a.shape[-1] != b.shape[-1]:
        raise ValueError(f"cannot intersect boxes of {a.shape[-1]} and {b.shape[-1]} objectives")
    if a.shape[-1] == 0:
        raise ValueError("box corners must have at least one dimension")

    return np.maximum(a, b)


def sort_by_first_coordinate(points: np.ndarray) -> np.ndarray:
    """Return a copy of points sorted ascending by their first coordinate.

    The sort is stable so that ties keep their input order, which makes the
    summation order (and therefore the rounding) reproducible.

    Args:
        points: Point set of shape (n, n_obj).

    Returns:
        New array of shape (n, n_obj).
    """
    order = np.argsort(points[:, 0], kind="stable")
    return points[order]


def is_sorted_by_first_coordinate(points: np.ndarray) -> bool:
    """Check whether first coordinates are non-decreasing.

    Args:
        points: Point set of shape (n, n_obj).

    Returns:
        True for empty and single-point sets.
    """
    return bool(np.all(points[1:, 0] >= points[:-1, 0]))


def staircase_filter(corners: np.ndarray) -> np.ndarray:
    """Reduce an ordered sequence of intersection corners to a covering subset.

    Scans left to right keeping the first corner. Each later corner is kept
    only if the most recently kept corner is strictly greater on at least one
    axis; otherwise its box lies inside the kept corner's box and adds nothing
    to the union.

    Args:
        corners: Intersection corners of shape (n, n_obj), in the order of the
            points they were derived from (ascending first coordinate).

    Returns:
        Array of shape (m, n_obj), m <= n, holding the kept corners in order.

    Examples:
        >>> staircase_filter(np.array([[0.3], [0.5]]))
        array([[0.3]])
        >>> staircase_filter(np.array([[0.6, 0.5], [0.8, 0.2]]))
        array([[0.6, 0.5],
               [0.8, 0.2]])
    """
    if corners.shape[0] == 0:
        return corners

    kept = [0]
    for i in range(1, corners.shape[0]):
        if np.any(corners[kept[-1]] > corners[i]):
            kept.append(i)

    return corners[kept]

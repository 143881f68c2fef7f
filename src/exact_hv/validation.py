"""Input validation for hypervolume computation.

Turns caller-supplied array-likes into float64 arrays with the shapes the
algorithms rely on, or raises ValueError. Checks are limited to shape,
dimensionality consistency and finiteness; whether points actually dominate the
reference point is left to the caller.
"""

import numpy as np


def as_reference_point(reference_point) -> np.ndarray:
    """Convert a reference point to a 1D float64 array.

    Args:
        reference_point: Array-like of shape (n_obj,).

    Returns:
        Float64 array of shape (n_obj,). May share memory with the input;
        callers must not write to it.

    Raises:
        ValueError: If the reference point is not 1D, is empty, or contains NaN or inf.

    Examples:
        >>> as_reference_point([1.0, 2.0])
        array([1., 2.])
    """
    ref = np.asarray(reference_point, dtype=np.float64)

    if ref.ndim != 1:
        raise ValueError(f"reference_point must be 1D, got shape {ref.shape}")
    if ref.shape[0] == 0:
        raise ValueError("reference_point must have at least one dimension")
    if not np.isfinite(ref).all():
        raise ValueError("reference_point must be finite, got NaN or inf")

    return ref


def as_point_set(points, n_obj: int) -> np.ndarray:
    """Convert a collection of points to a 2D float64 array.

    An empty collection is accepted in any dimension and becomes an array of
    shape (0, n_obj).

    Args:
        points: Array-like of shape (n, n_obj), or an empty sequence.
        n_obj: Expected number of objectives (the reference point's length).

    Returns:
        Float64 array of shape (n, n_obj).

    Raises:
        ValueError: If points are not 2D, their dimension differs from n_obj,
            or any coordinate is NaN or inf.
    """
    pts = np.asarray(points, dtype=np.float64)

    if pts.ndim in (1, 2) and pts.shape[0] == 0:
        return np.empty((0, n_obj), dtype=np.float64)

    if pts.ndim != 2:
        raise ValueError(f"points must be 2D, got shape {pts.shape}")
    if pts.shape[1] != n_obj:
        raise ValueError(
            f"points have {pts.shape[1]} objectives, expected {n_obj} to match reference_point"
        )
    if not np.isfinite(pts).all():
        raise ValueError("points must be finite, got NaN or inf")

    return pts

"""Hypervolume of many independent point sets.

Each point set is evaluated against the same reference point. Evaluations
share no state, so they can be spread over joblib workers.
"""

from collections.abc import Iterable

import numpy as np

from exact_hv.registry import HypervolumeRegistry


def compute_many(
    point_sets: Iterable,
    reference_point,
    n_workers: int = 1,
    algorithm: str = "wfg",
) -> np.ndarray:
    """Compute the hypervolume of each point set against one reference point.

    Args:
        point_sets: Iterable of point sets, each array-like of shape (n_i, n_obj).
            Sets may differ in size.
        reference_point: Array-like of shape (n_obj,).
        n_workers: Number of joblib workers. 1 runs sequentially, -1 uses all
            CPU cores. Workers parallelize across sets, never within one.
        algorithm: Name of a registered hypervolume algorithm.

    Returns:
        Float64 array of shape (n_sets,) in input order.

    Raises:
        KeyError: If algorithm is not registered.
        ValueError: If n_workers is 0, or any set fails validation.

    Example:
        >>> compute_many([[[0.5]], [[0.25], [0.5]]], [1.0])
        array([0.5 , 0.75])
    """
    if n_workers == 0:
        raise ValueError("n_workers must be non-zero")

    hypervolume = HypervolumeRegistry.get(algorithm)
    sets = list(point_sets)

    if n_workers == 1:
        volumes = [hypervolume(points, reference_point) for points in sets]
    else:
        from joblib import Parallel, delayed

        volumes = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
            delayed(hypervolume)(points, reference_point) for points in sets
        )

    return np.array(volumes, dtype=np.float64).reshape(len(sets))

"""Reference hypervolume for benchmarking.

This module wraps pymoo's hypervolume indicator so benchmark results can be
checked against an independent implementation.
"""

import numpy as np
from pymoo.indicators.hv import HV


def reference_hypervolume(objectives: np.ndarray, ref_point: np.ndarray) -> float:
    """Compute the hypervolume indicator with pymoo.

    Args:
        objectives: (n, n_obj) objective values of the Pareto front approximation
        ref_point: (n_obj,) reference point, worse than every point in objectives

    Returns:
        Hypervolume value

    Raises:
        ValueError: If objectives array is empty or has wrong shape
    """
    if objectives.size == 0:
        raise ValueError("objectives array cannot be empty")

    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    indicator = HV(ref_point=ref_point)
    return float(indicator(objectives))

"""Synthetic Pareto fronts for hypervolume benchmarking.

Each generator draws points on a known front shape in the unit box, so every
point is non-dominated and the hypervolume grows with front resolution. All
fronts are for minimization with the reference point slightly beyond (1, ..., 1).

References:
    Deb, K., Thiele, L., Laumanns, M., & Zitzler, E. (2005). Scalable test
    problems for evolutionary multiobjective optimization. In Evolutionary
    Multiobjective Optimization (pp. 105-145). Springer.
"""

from collections.abc import Callable

import numpy as np

REF_OFFSET: float = 1.1


def linear_front(n_points: int, n_obj: int, rng: np.random.Generator) -> np.ndarray:
    """DTLZ1-style linear front: objectives sum to 1.

    Args:
        n_points: Number of points to draw.
        n_obj: Number of objectives.
        rng: Random number generator.

    Returns:
        Points (n_points, n_obj) to minimize
    """
    return rng.dirichlet(np.ones(n_obj), size=n_points)


def spherical_front(n_points: int, n_obj: int, rng: np.random.Generator) -> np.ndarray:
    """DTLZ2-style concave front: points on the positive unit sphere.

    Args:
        n_points: Number of points to draw.
        n_obj: Number of objectives.
        rng: Random number generator.

    Returns:
        Points (n_points, n_obj) to minimize
    """
    directions = np.abs(rng.normal(size=(n_points, n_obj)))
    return directions / np.linalg.norm(directions, axis=1, keepdims=True)


def convex_front(n_points: int, n_obj: int, rng: np.random.Generator) -> np.ndarray:
    """Convex front: the spherical front reflected towards the origin.

    Args:
        n_points: Number of points to draw.
        n_obj: Number of objectives.
        rng: Random number generator.

    Returns:
        Points (n_points, n_obj) to minimize
    """
    return 1.0 - spherical_front(n_points, n_obj, rng)


def random_cloud(n_points: int, n_obj: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform points in the unit box, most of them dominated.

    Args:
        n_points: Number of points to draw.
        n_obj: Number of objectives.
        rng: Random number generator.

    Returns:
        Points (n_points, n_obj) to minimize
    """
    return rng.uniform(0, 1, size=(n_points, n_obj))


# Registry of all front generators
FRONTS: dict[str, Callable[[int, int, np.random.Generator], np.ndarray]] = {
    "linear": linear_front,
    "spherical": spherical_front,
    "convex": convex_front,
    "random": random_cloud,
}

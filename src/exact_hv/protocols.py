"""Protocol definition for hypervolume algorithms.

Every algorithm in the package, and any user-supplied replacement, is a plain
callable taking a point set and a reference point and returning the volume.
This lets the registry and batch evaluation treat them interchangeably.

Example usage:
    ```python
    def evaluate_fronts(algorithm: HypervolumeAlgorithm, fronts, ref):
        return [algorithm(front, ref) for front in fronts]
    ```
"""

from typing import Protocol, runtime_checkable

from numpy.typing import ArrayLike


@runtime_checkable
class HypervolumeAlgorithm(Protocol):
    """Protocol for exact hypervolume algorithms.

    Parameters:
        points: Point set of shape (n, n_obj), minimization. May be empty.
        reference_point: Reference point of shape (n_obj,).

    Returns:
        The non-negative volume of the region dominated by points and bounded
        by reference_point.

    Example implementations:
        - compute: recursive slicing, any number of objectives
        - sweep_2d: single sweep, two objectives only
    """

    def __call__(self, points: ArrayLike, reference_point: ArrayLike) -> float:
        """Compute the hypervolume of points relative to reference_point."""
        ...
